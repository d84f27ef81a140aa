"""Setup script for cli2048 package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="cli2048",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="The 2048 sliding-tile puzzle in the terminal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cli2048", "cli2048.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "cli2048=cli2048.cli.play:main",
        ],
    },
)
