from setuptools import setup
from Cython.Build import cythonize

# python setup.py build_ext --inplace
setup(
    name='sorted-int-search',
    version='1.0.0',
    description='Binary search over sorted integer sequences',
    py_modules=['binary_search'],
    ext_modules=cythonize(
        "binary_search.py",
        compiler_directives={'language_level': 3, 'annotation_typing': False},
    ),
    python_requires='>=3.8',
    install_requires=['Cython'],
    extras_require={'test': ['pytest']},
    zip_safe=False,
)
