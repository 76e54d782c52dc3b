#!/usr/bin/env python3
from setuptools import setup


def get_requirements():
    """Build the requirements list for this project"""
    requirements_list = []

    with open('requirements.txt') as requirements:
        for install in requirements:
            if install.strip():
                requirements_list.append(install.strip())

    return requirements_list


setup(
    name='catpoint',
    version='0.1',
    license='MIT',
    description='Home security alarm driven by door, window and motion sensors and a cat camera',
    long_description=open('README.md', encoding='utf-8').read(),
    packages=[
        'catpoint',
        'catpoint.agents'
    ],
    scripts=['catpoint-cli.py'],
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        'Environment :: Console',
        'Topic :: Security',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3 :: Only'
    ],
)
