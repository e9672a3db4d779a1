#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="lol_chat_tools",
    version="1.0.0",
    description="Python tools for parsing League of Legends chat logs into structured reports",
    author="Bohdan Tarverdiiev",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    package_data={
        "config": ["profiles/*.example"],
    },
    python_requires=">=3.8",
    install_requires=[
        "pyparsing>=3.0.0",
        "numpy>=1.19.0",
        "pandas>=1.0.0",
        "openpyxl>=3.0.0",
        "matplotlib>=3.0.0",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "lol-chat-parser=lol_chat_tools.tools.chat_log_parser:main",
            "lol-report-to-excel=lol_chat_tools.tools.report_to_excel:main",
            "lol-timeline-plot=lol_chat_tools.tools.timeline_plotter:main",
        ],
    },
)
