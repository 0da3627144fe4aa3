# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Output helpers for markup.
The library never writes while rendering; these are for embedding pipelines and debugging.
'''

import sys
from typing import Any, TextIO

from .markup import ContentLax, markup_str


def writeM(file:TextIO, *labels_and_content:Any, flush=False) -> None:
  '''
  Write the rendered markup of a content value, preceded by optional labels.
  The last positional argument is the content; any preceding arguments are labels joined by spaces.
  '''
  if not labels_and_content: raise ValueError('writeM requires content to render')
  *labels, content = labels_and_content
  html = markup_str(content)
  prefix = ' '.join(str(l) for l in labels) + ': ' if labels else ''
  print(prefix, html, sep='', file=file, flush=flush)

def outM(*labels_and_content:Any, flush=False) -> None:
  'Write labeled markup to std out.'
  writeM(sys.stdout, *labels_and_content, flush=flush)

def errM(*labels_and_content:Any, flush=False) -> None:
  'Write labeled markup to std err.'
  writeM(sys.stderr, *labels_and_content, flush=flush)


def render_to(file:TextIO, root:ContentLax) -> int:
  'Render `root` and write the markup to `file`, followed by a newline. Returns the number of characters written.'
  return file.write(markup_str(root) + '\n')
