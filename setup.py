from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

PROJECT_ROOT = Path(__file__).resolve().parent
README = (PROJECT_ROOT / "README.md").read_text(encoding="utf-8")

setup(
    name="persian-date-picker",
    version="0.1.0",
    description="Jalali calendar conversion engine and headless date picker state",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Persian Date Picker Contributors",
    author_email="support@example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "frappe": ["frappe>=14.0.0"],
        "test": ["pytest>=7.0", "jdatetime>=4.1", "convertdate>=2.4"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Framework :: Frappe",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: Persian",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business",
    ],
)
