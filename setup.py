from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

setup(
    name='htmldialect',
    version='0.1.0',
    description='markup element tree with dialect aware (html5/xhtml) rendering',
    long_description=readme,
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
    },
)
