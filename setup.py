from setuptools import setup, find_packages

setup(
    name="file-stats",
    version="1.0.0",
    packages=find_packages(include=["file_stats", "file_stats.*"]),
    description="Report the distribution of file extensions under a directory by count or size.",
    python_requires=">=3.8",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "file-stats=file_stats.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
