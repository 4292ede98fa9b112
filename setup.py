# setup.py

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text() if readme.exists() else ""

setup(
    name="emergency-alerts",
    version="0.1.0",
    author="Aurelien Courreges-Clercq",
    description="Forwards newly created emergency alerts to the security push topic",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "pydantic>=2.0.0",
        "firebase-admin>=6.0.0",
        "firebase-functions>=0.4.0",
    ],

    extras_require={
        "dev": ["pytest", "black", "mypy"]
    },

    entry_points={
        "console_scripts": [
            "emergency-alerts=emergency_alerts.main:main",
        ],
    },

    python_requires=">=3.10",

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
