from setuptools import setup, find_packages


setup(name='minesweeper-probability',
      version='1.0',
      description='Exact mine probabilities for variable-size minesweeper boards',
      python_requires='>=3.8',
      install_requires=['numpy>=1.20', 'scipy>=1.8', 'python-constraint>=1.4.0'],
      extras_require={'test': ['pytest>=7']},
      packages=find_packages(exclude=['tests', 'tests.*'])
    )
