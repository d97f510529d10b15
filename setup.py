# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name='rational32',
    version='0.1.0',
    description='Fractions of two signed 32-bit integers with overflow-checked arithmetic',
    license='Apache-2.0',
    python_requires='>=3.10',
    packages=find_packages(include=['rational32', 'rational32.*']),
    package_data={
        'rational32': ['rational.lark'],
    },
    install_requires=[
        'atpublic',
        'lark',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'rational32=rational32.cli:main',
        ],
    },
)
