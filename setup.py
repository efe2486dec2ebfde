"""Setup script for playsync."""

from setuptools import setup, find_namespace_packages

setup(
    name="playsync",
    version="0.1.0",
    description="Sync YouTube playlists from other playlists",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "google-auth>=2.0.0",
        "google-auth-oauthlib>=0.4.0",
        "python-dotenv>=0.19.0",
        "tqdm>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "playsync=playsync.cli:main",
        ]
    },
)
