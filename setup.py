"""
Setup script for the photo-contest package.
"""

from setuptools import setup, find_packages

setup(
    name="photo-contest",
    version="1.0.0",
    description="Photo contest engine - phase-driven contests with reactive participants",
    author="Course Staff",
    license="Proprietary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
        "dev": [
            "pytest>=7.0",
            "hypothesis>=6.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "photo-contest=photo_contest.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
