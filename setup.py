from setuptools import setup, find_packages

setup(
    name="host_utils",
    version="1.0.0",
    description="Cross-platform shell command runner, process killer and file finder for test automation.",
    author="Maxwell Carlson",
    author_email="carlsonamax@gmail.com",
    packages=find_packages(include=["host_utils", "host_utils.*"]),
    python_requires=">=3.8",
    install_requires=[
        "psutil",
        "GitPython",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "host-utils=host_utils.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
