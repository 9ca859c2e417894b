"""
Setup script for MarkdownImageLocalizer.
"""

from setuptools import setup
import os

# Read the contents of README.md
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Read version from the main module
with open(os.path.join(this_directory, 'md_image_localizer.py'), encoding='utf-8') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"\'')
            break

setup(
    name="markdown-image-localizer",
    version=version,
    description="Downloads the remote images of a markdown file and rewrites its links to local copies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="",
    author_email="",
    url="",
    # Flat layout: every module lives at the top level
    py_modules=["cli_parser", "exceptions", "http_client", "image_fetcher",
                "logger_setup", "markdown_processor", "md_image_localizer", "utils"],
    entry_points={
        "console_scripts": [
            "md-image-localizer=md_image_localizer:main",
        ],
    },
    install_requires=[
        "requests>=2.25.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "urllib3"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Markup :: Markdown",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
)
