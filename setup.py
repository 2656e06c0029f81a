"""
Setup script for the mind-reader package with optional Cython compilation.

This builds the internal modules (_*.py) as compiled extensions,
while keeping the public API (controller.py, types.py, errors.py)
as readable Python source.
"""

from setuptools import setup, find_packages, Extension
import os

# Check if Cython is available
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not found. Building without compilation (source only).")

# Internal modules to compile with Cython
CYTHON_MODULES = [
    "src/mind_reader/_config.py",
    "src/mind_reader/_state.py",
]


def get_extensions():
    """Build Extension objects for Cython compilation."""
    if not USE_CYTHON:
        return []

    extensions = []
    for module_path in CYTHON_MODULES:
        if os.path.exists(module_path):
            # Convert path to module name: src/mind_reader/_foo.py -> mind_reader._foo
            module_name = module_path.replace("src/", "").replace("/", ".").replace(".py", "")
            extensions.append(
                Extension(
                    name=module_name,
                    sources=[module_path],
                )
            )
    return extensions


def get_ext_modules():
    """Get extension modules, cythonized if Cython is available."""
    extensions = get_extensions()
    if not extensions:
        return []

    return cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
        },
        nthreads=os.cpu_count() or 1,
    )


# Only compile when explicitly requested; editable/dev installs stay pure Python
ext_modules = get_ext_modules() if USE_CYTHON and os.environ.get("MIND_READER_COMPILE") else []

setup(
    name="mind-reader",
    version="1.0.0",
    description="Number guessing game with best-effort language-model commentary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    ext_modules=ext_modules,
    install_requires=[
        "anthropic>=0.40.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.23.0",
        ],
        "dev": [
            "cython>=3.0",
            "build",
            "wheel",
            "pytest>=7.0",
            "httpx>=0.23.0",
        ],
    },
    package_data={
        "mind_reader": ["*.so", "*.pyd"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
)
