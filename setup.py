from setuptools import setup, find_packages

setup(
    name="whoisparser",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "rich",
        "typer",
        "pyyaml",
        "idna",  # For punycode conversion
        "python-dateutil"  # For timestamp handling
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'whoisparser=main:app',
        ],
    },
)
