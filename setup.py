from os import path
from codecs import open
from setuptools import setup


here = path.abspath(path.dirname(__file__))


with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='p256vrf',
    version='0.1.0',
    packages=["p256vrf", "p256vrf.crypto", "p256vrf.utils"],
    license='MIT',
    description='Verifiable random function over the NIST P-256 group',
    long_description=long_description,
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Topic :: Security :: Cryptography'
    ],
    python_requires='>=3.6',
    install_requires=[
        'six',
        'petlib',
        'pyyaml',
        'attrs >= 19.2',
        'base58 >= 2.0',
        'defaultcontext',
    ],
    extras_require={
        'test': ['pytest'],
    },

)
