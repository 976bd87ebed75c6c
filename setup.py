"""
Setup script for the NFC Card Scanner bridge.
"""

from setuptools import setup, find_packages

setup(
    name="nfc-card-scanner",
    version="1.0.0",
    description="Serial NFC playing card reader bridge for a card game service",
    author="Card Scanner Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    python_requires=">=3.8",
    install_requires=[
        "pyserial>=3.5",
        "requests>=2.25.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "card-scanner=cli.app:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: System :: Hardware",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
