"""
Setup script for G4Fasta2Bed.

Installs the detector and utility packages plus the ``g4fasta2bed``
command-line entry point.

Usage:
    pip install -e .
    pip install -e ".[test]"     # with the test runner
"""

from setuptools import setup, find_packages

setup(
    name='G4Fasta2Bed',
    version='2025.1',
    description='G-quadruplex motif scanning of FASTA files with BED output',
    author='Dr. Venkata Rajesh Yella',
    license='MIT',
    packages=find_packages(include=['Detectors', 'Detectors.*', 'Utilities', 'Utilities.*']),
    py_modules=['g4fasta2bed'],
    python_requires='>=3.8',
    install_requires=[
        'pandas>=1.3',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'g4fasta2bed=g4fasta2bed:main',
        ],
    },
    zip_safe=False,
)
