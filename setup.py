#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from os import path

from setuptools import setup

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='objmapper',
    description='Declarative mapping of plain JSON-like data to objects and back',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version='0.1',
    license='Apache2',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3'
    ],
    packages=['objmapper'],
    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
