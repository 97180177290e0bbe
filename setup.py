from setuptools import find_packages, setup

setup(
    name="flagline",
    version="0.1.0",
    description="Command-line flag parsing engine with POSIX clustering and value lists.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "pydantic>=2",
        "python-json-logger>=3.1",
        "PyYAML>=6",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
