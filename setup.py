from setuptools import setup, find_packages

setup(
    name="gendesk",
    version="0.7.0",
    description="Desktop File Generator - generate .desktop files from a PKGBUILD",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.1.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gendesk=gendesk.main:main",
        ],
    },
)
