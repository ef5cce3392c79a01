#!/usr/bin/env python3
"""
Setup script for the Feedback Sentiment service.

Installs the service package together with the shared common module
(logging), and exposes the feedback-sentiment command line tool.
"""

import os

from setuptools import find_packages, setup


# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return ""


# Read requirements from requirements.txt
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), "requirements.txt")
    if os.path.exists(req_path):
        with open(req_path, "r", encoding="utf-8") as f:
            return [
                line.strip()
                for line in f
                if line.strip() and not line.startswith("#")
            ]
    return [
        "fastapi>=0.115.0",
        "uvicorn[standard]>=0.30.0",
        "pydantic>=2.11.7",
        "pydantic-settings>=2.10.1",
        "motor>=3.5.0",
        "langchain-core>=0.3.26",
        "langchain-openai>=0.3.26",
        "colorama>=0.4.6",
        "typer>=0.12.0",
        "rich>=13.7.0",
        "httpx>=0.28.1",
    ]


setup(
    name="feedback-sentiment",
    version="1.0.0",
    description="Feedback collection service with sentiment tagging and a heuristic fallback",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(
        include=["common", "common.*", "feedback_sentiment", "feedback_sentiment.*"]
    ),
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "test": [
            "pytest>=8.4.1",
            "pytest-asyncio>=0.23.0",
        ],
        "dev": [
            "pytest>=8.4.1",
            "pytest-asyncio>=0.23.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "feedback-sentiment=feedback_sentiment.cli:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: FastAPI",
    ],
    include_package_data=True,
    zip_safe=False,
)
