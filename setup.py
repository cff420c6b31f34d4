from setuptools import setup, find_packages

setup(
    name="hls-playlist",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "features", "features.*"]),
    include_package_data=True,
    install_requires=[
        "typer",
        "rich",
        "toolz",
        "pymonad>=2.4.0",
        "PyYAML",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-mock",
            "behave",
            "ruff",
            "setuptools",
            "wheel",
            "twine",
        ]
    },
    entry_points={
        "console_scripts": [
            "hls-playlist = hls_playlist.cli:app",
        ],
    },
    description="Parse, validate and format HLS (M3U8) playlists.",
    long_description=open("README.adoc").read(),
    long_description_content_type="text/asciidoc",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Video",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.8",
)
