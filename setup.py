import os.path

import setuptools

root_dir = os.path.abspath(os.path.dirname(__file__))
readme_file = os.path.join(root_dir, "README.rst")
with open(readme_file, encoding="utf-8") as f:
    long_description = f.read()

install_requires = [
    "attrs",
]

extras_require = {
    "dev": [
        "coverage[toml]>=7.2.2",
        "mypy",
        "ruff",
    ],
}

setuptools.setup(
    name="rangegaps",
    version="0.3.0",
    description="Lazily iterate over the gaps between ordered ranges",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    package_dir={"": "src"},
    packages=["rangegaps"],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
)
