# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='ember',
  version='0.0.1',
  description='ember is a declarative component library for generating static HTML markup.',
  python_requires='>=3.11',

  packages=['ember', 'utest'],
)
