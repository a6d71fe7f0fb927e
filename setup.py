# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.


import setuptools
import re


with open('src/duoauth/__init__.py', 'r') as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

with open('README.md', 'r') as fd:
    long_description = fd.read()

setuptools.setup(
    name='duoauth',
    version=version,
    description='Signed request client for the Duo Admin and Auth APIs.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3'
    ],
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    include_package_data=True,
    install_requires=[
        'PyYAML==6.0.1',
        'requests==2.32.3',
        'ujson==5.5.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
        ]
    },
    entry_points={
        'console_scripts': [
            'duo-request = duoauth.bin.duo_request:main'
        ]
    }
)
