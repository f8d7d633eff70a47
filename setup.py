# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='climb',
  version='0.0.1',
  description='Operator precedence climbing for Python 3, with an arithmetic calculator built on it.',

  python_requires='>=3.10',
  packages=['climb', 'utest'],
  entry_points={'console_scripts': ['climb-calc=climb.__main__:main']},
)
