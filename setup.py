import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="relaykit",
    version="0.1.0",
    author="Robert Myers",
    author_email="robert@julython.org",
    description="Relay compliant GraphQL schema for users, widgets and people",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"relaykit": ["*.graphql"]},
    install_requires=[
        "graphql-core>=3.2",
        "graphql-relay>=3.2",
        "python-dotenv",
        "starlette",
        "typing_extensions",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "httpx",
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": ["relaykit=relaykit.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
