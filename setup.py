from setuptools import setup, find_namespace_packages
from pathlib import Path

ROOT = Path(__file__).resolve().parent

try:
    with open(ROOT / 'README.md', 'r') as readme:
        long_description = readme.read()
except FileNotFoundError:
    long_description = ''

exec(open(ROOT / 'strong/collections/_version.py').read())

setup(
    name='strong-collections',
    version=__version__,
    description='Sequences, maps, and sets driven by pluggable equality and ordering comparers',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='',
    author_email='',
    url='',
    license='',
    python_requires='>=3.8',
    install_requires=["pydantic[dotenv]>=1.10.8,~=1.10", "typing_extensions"],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_namespace_packages(include=['strong.*'], exclude=['strong.test', 'strong.test.*'])
)
