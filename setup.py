"""
setuptools module for rttm.
"""
from pathlib import Path
import re
from setuptools import setup, find_packages

PACKAGE_NAME = "rttm"
INIT_FILE = Path(__file__).parent / PACKAGE_NAME / "__init__.py"

# Load version from __init__.py
with open(INIT_FILE, encoding="utf-8") as f:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                        f.read(), re.MULTILINE).group(1)

# Load load description from README.md
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

# Load requirements (if any) from requirements.txt
requirements = []
try:
    with open(this_directory / 'requirements.txt', encoding="utf-8") as f:
        requirements = [line for line in f.read().splitlines() if line and not line.startswith("#")]
except FileNotFoundError:
    pass

setup(
    name=PACKAGE_NAME,
    version=version,
    description='reader/writer for Rich Transcription Time Marked (RTTM) speaker turn files',
    packages=find_packages(include=[PACKAGE_NAME, f"{PACKAGE_NAME}.*"]),
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',

    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 4 - Beta',

        "Intended Audience :: Developers",
        'Topic :: Multimedia :: Sound/Audio :: Speech',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing :: Linguistic',

        "Operating System :: OS Independent",

        'Programming Language :: Python :: 3',
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],

    keywords=[
        'RTTM',
        'diarization',
        'speaker diarization',
        'NIST',
        'rich transcription',
        'speech',
        'annotation',
    ],

)
