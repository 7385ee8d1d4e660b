from setuptools import setup, find_packages
from pathlib import Path

with Path('README.md').open(encoding='utf-8') as readme:
    readme = readme.read()

version = "0.1"

setup(
    name='indrascheme',
    version=version if isinstance(version, str) else str(version),
    keywords="LISP, scheme, s-expressions, reader, parser, tokenizer",
    description="A minimal S-expression reader producing typed atom trees",
    long_description=readme,
    long_description_content_type="text/markdown",
    license='mit',
    python_requires='>=3.6.0',
    packages=find_packages(include=['indra', 'indra.*']),
    entry_points={"console_scripts": ["indra=indra.repl:main"]},
    install_requires=['attrs>=19.2.0'],
    extras_require={'test': ['pytest']},
    platforms="any",
    classifiers=[
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    zip_safe=False,
)
