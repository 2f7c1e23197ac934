from setuptools import setup, find_packages

setup(
    name="argmatch",
    version="0.1.0",
    description="Declare command-line arguments and match token streams against them.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argmatch", "argmatch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "PyYAML",
        "toml",
        "rich",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
