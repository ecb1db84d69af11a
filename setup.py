#!/usr/bin/env python

from setuptools import setup, find_packages
import emailaddress

setup(name='emailaddress',
      version=emailaddress.__version__,
      description='RFC2822 email address validation and extraction.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=['test']),
      package_dir={'emailaddress': 'emailaddress'},
      python_requires=">=3.11",
      install_requires=[
          'netaddr >= 0.7.19',
          'typing_extensions'
      ],
      extras_require={
          'dev': [
          'mypy'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3.11',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Communications :: Email',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
