"""Task CLI - Simple personal task tracking."""
from setuptools import setup, find_packages

setup(
    name="task-cli",
    version="1.0.0",
    description="Personal task tracker with a CLI and a small JSON HTTP API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "flask>=2.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "task=task_cli.cli:main",
        ],
    },
    python_requires=">=3.10",
)
