#!/usr/bin/env python
import os
from setuptools import setup, find_packages

repo_base_dir = os.path.abspath(os.path.dirname(__file__))
# pull in the packages metadata
package_about = {}
with open(os.path.join(repo_base_dir, "seqlet", "__about__.py")) as about_file:
    exec(about_file.read(), package_about)

with open(os.path.join(repo_base_dir, 'long_description.rst'), 'r') as description_file:
    long_description = description_file.read()


if __name__ == '__main__':
    setup(
        name=package_about['__title__'],
        version=package_about['__version__'],
        description=package_about['__summary__'],
        long_description=long_description.strip(),
        author=package_about['__author__'],
        author_email=package_about['__email__'],
        url=package_about['__url__'],
        packages=find_packages(exclude=('seqlet_unittests', 'seqlet_unittests.*')),
        zip_safe=True,
        # dependencies
        install_requires=[],
        python_requires='>=3.6',
        # metadata for package seach
        license='MIT',
        classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'Intended Audience :: Education',
            'License :: OSI Approved :: MIT License',
            'Topic :: Software Development :: Libraries',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3 :: Only',
        ],
        keywords='lazy sequence iterator channel handoff thread pipeline',
        # unit tests
        test_suite='seqlet_unittests',
    )
