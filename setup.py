from setuptools import setup, find_packages

setup(
    name="termstyler",
    version="0.1.0",
    description="Compose and decode ANSI SGR escape sequences for styled terminal text",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
