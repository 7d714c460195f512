from setuptools import setup, find_packages

setup(
    name="ai-youtube-transcript",
    version="1.0.2",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.8.0",
        "colorlog>=6.7.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "youtube-transcript=youtube_transcript.main:main",
        ],
    },
    python_requires=">=3.8",
    description="Fetch, translate and format YouTube transcripts",
    author="Venkatesh Murugadas",
)
