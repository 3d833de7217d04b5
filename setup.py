from setuptools import setup, find_packages

setup(
    name="exaCli",
    version="0.1.0",
    description="Command-line client for the Exa search and research API",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(include=["exaCli", "exaCli.*", "api_clients"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "requests>=2.31.0",
        "keyring>=24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "requests-mock>=1.11",
        ],
    },
    entry_points={
        "console_scripts": ["exa=exaCli.cli:main"],
    },
    license="MIT",
)
