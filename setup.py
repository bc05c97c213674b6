"""Packaging for TimeTracker.

Install for development:
    pip install -e .[test]

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "TimeTracker",
        "CFBundleDisplayName": "TimeTracker",
        "CFBundleIdentifier": "com.timetracker.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
    }

setup(
    name="TimeTracker",
    version="0.1.0",
    description="Per-task time tracking over job presets",
    packages=find_packages(include=["timetracker", "timetracker.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "platformdirs>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "gui_scripts": ["timetracker = timetracker.__main__:main"],
    },
    **py2app_kwargs,
)
