from setuptools import setup, find_namespace_packages


setup(
    name="htmlinliner",
    version="1.0.0",
    description="Inline local stylesheets and scripts into a single HTML file",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["htmlinliner", "htmlinliner.*"]),
    install_requires=["lxml>=4.9"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["htmlinliner = htmlinliner.cli:main"]},
)
