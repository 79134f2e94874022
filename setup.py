# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

pyx_files = [
    (
        "heapstats.binary_heap.binary_heap",
        "heapstats/binary_heap/binary_heap.pyx"
    ),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Create a Cython extension for each available .pyx file.

    Parameters
    ----------
    pyx_files : list[tuple]
        Pairs of the extension name in `package.module` format and the
        `path` to its .pyx file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    extra_compile_args = [] if sys.platform == "win32" else ["-O3"]
    return [
        Extension(
            name=module_name,
            sources=[pyx_path],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        for module_name, pyx_path in pyx_files
    ]


def main() -> None:
    """Main setup function for compiling"""
    files = [
        (name, path)
        for name, path in pyx_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No .pyx files found to compile")

    setup(
        ext_modules=cythonize(
            create_extensions(files),
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=find_packages(include=["heapstats", "heapstats.*"]),
        zip_safe=False
    )


if __name__ == "__main__":
    main()
