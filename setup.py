"""Setup configuration for acestatus."""

from setuptools import setup, find_packages

with open("docs/README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="acestatus",
    version="0.1.0",
    author="acestatus contributors",
    description="Real-time Altamont Corridor Express train status with IFTTT notifications",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://www.acerail.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"acestatus": ["seed_data/*.json"]},
    entry_points={
        "console_scripts": [
            "acestatus=acestatus.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Monitoring",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "dev": ["pytest>=6.0", "black", "flake8"],
        "test": ["pytest>=6.0"],
    },
)
