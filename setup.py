#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name='metamodel',
    version='0.1.0.dev0',
    description='Object metadata models exposed as REST fields',
    packages=find_packages(),
    keywords='metadata model registry rest marshmallow sqlalchemy',
    python_requires='>=3.8',
    install_requires=[
        'sqlalchemy>=1.4',
        'marshmallow>=3.0',
        'inflection',
        'sqlparse',
    ],
    extras_require={
        'test': [
            'pytest',
            'faker',
        ],
    },
)
