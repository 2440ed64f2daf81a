from setuptools import setup, find_packages

setup(
    name="apicurio-release-tool",
    version="1.0.0",
    description="Release notes generation and GitHub release automation for Apicurio projects",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "release-tool=release_tool.cli:main",
        ],
    },
)
