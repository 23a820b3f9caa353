from setuptools import setup

with open('requirements.txt') as f:
    INSTALL_REQUIRES = [l.strip() for l in f.readlines() if l.strip()]

setup(name='arffload',
      version='0.0.1',
      description='A strict ARFF (Attribute-Relation File Format) reader',
      author='Raghav R V',
      packages=['arffload'],
      python_requires='>=3.10',
      install_requires=INSTALL_REQUIRES,
      extras_require={'test': ['pytest', 'scipy']},
      author_email='rvraghav93@gmail.com',
      )
