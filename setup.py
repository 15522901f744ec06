from setuptools import setup, find_packages

# Updated by a script (in the future maybe)
VERSION = "0.1.0-dev"

with open('README.md', 'r', encoding='utf-8') as f:
    readme = f.read()

setup(
    name='rosetree',
    version=VERSION,
    packages=find_packages(exclude=('tests*',)),

    description='Immutable rose trees with folds, unfolds and traversals',
    long_description=readme,
    long_description_content_type='text/markdown',
    license='MIT',
    keywords='immutable data structures tree recursion schemes',
    python_requires='>=3.10',
    extras_require={
        'dev': [
            'pytest',
            'flake8',
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Development Status :: 3 - Alpha",
    ],
)
