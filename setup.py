from setuptools import setup, find_packages

setup(
    name="atc-command-schemes",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.7",
        "structlog>=23.1",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.100",
        ],
    },
    entry_points={
        "console_scripts": [
            "atc-commands=atc_commands.cli:main",
        ],
    },
    description="Command scheme engine for an ATC training simulator: parse and render controller commands in several dialects.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
