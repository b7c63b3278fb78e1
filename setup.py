from setuptools import find_packages, setup

setup(
    name="wfs",
    version="0.1.0",
    description="Workspace File System - URI-addressed file access with coalesced change notification",
    author="William Wieselquist",
    packages=find_packages(include=["wfs", "wfs.*"]),
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "pydantic>=2.0",  # Configuration models
        "typer<0.26",  # CLI (later releases vendor their own click)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "aiofiles",  # Async file content I/O
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-asyncio>=0.23",  # Coroutine tests
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-aiofiles",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "wfsc=wfs.cli:main",
        ],
    },
)
