#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import re
from io import open

from setuptools import setup

readme = open('README.rst', encoding='utf8').readlines()

assert 'Collect page assets in zones, render each zone once' in readme[3]

readme = ''.join(['zonestash\n', '=========\n'] + readme[4:])


def read_reqs(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf8') as f:
        return [line for line in f.read().split('\n') if line and not line.strip().startswith('#')]


def read_version():
    with open(os.path.join('zonestash', '__init__.py'), encoding='utf8') as f:
        m = re.search(r'''__version__\s*=\s*['"]([^'"]*)['"]''', f.read())
        if m:
            return m.group(1)
        raise ValueError("couldn't find version")


setup(
    name='zonestash',
    version=read_version(),
    description='zonestash collects html assets in zones and renders each zone once',
    long_description=readme,
    packages=['zonestash'],
    include_package_data=True,
    install_requires=read_reqs('requirements.txt'),
    extras_require={
        'test': read_reqs('test_requirements.txt'),
    },
    python_requires='>=3.8',
    license="BSD",
    zip_safe=False,
    keywords='zonestash django assets',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Framework :: Django',
        'Programming Language :: Python :: 3',
    ],
)
