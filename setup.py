import os

from setuptools import setup


def readme():
    with open(os.path.join(os.path.dirname(__file__), 'README.md')) as f:
        return f.read()

setup(
    name='rational',
    version='1.0.0',
    description='A normalized rational number type for learning operator overloading',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Topic :: Education',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    keywords='rational fraction operator overloading education',
    license='MIT',
    packages=['rational'],
    scripts=[
        'bin/rational-demo',
    ],
    python_requires='>=3.10',
    install_requires=[
        'plac',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    zip_safe=False,
)
