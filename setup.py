from setuptools import find_packages, setup

setup(
    name="sealeye",
    version="0.1.0",
    description="Declarative command line interfaces with typed options and subcommands.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["sealeye", "sealeye.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
