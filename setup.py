#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup, find_packages


deps = {
    'beacon-clock': [
        "cached-property>=1.5.1,<3",
        "eth-utils>=2,<6",
    ],
    'test': [
        "hypothesis>=6,<7",
        "pytest>=7",
        "pytest-cov>=4",
        "pytest-randomly>=3.3.0",
        "pytest-xdist>=3",
    ],
    'lint': [
        "flake8>=6",
        "flake8-bugbear>=23",
        "mypy>=1",
    ],
    'dev': [
        "bumpversion>=0.5.3,<1",
        "wheel",
        "setuptools>=36.2.0",
        "tox>=4",
        "twine",
    ],
}


deps['dev'] = (
    deps['dev'] +
    deps['beacon-clock'] +
    deps['test'] +
    deps['lint']
)


install_requires = deps['beacon-clock']


with open('./README.md') as readme:
    long_description = readme.read()


setup(
    name='beacon-clock',
    # *IMPORTANT*: Don't manually change the version here. Use the 'bumpversion' utility.
    version='0.1.0-alpha.1',
    description='Slot, epoch and wall-clock conversions for the Ethereum beacon chain',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Ethereum Foundation',
    include_package_data=True,
    python_requires=">=3.8,<4",
    install_requires=install_requires,
    extras_require=deps,
    license='MIT',
    zip_safe=False,
    keywords='ethereum eth2 beacon chain slot epoch clock',
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
