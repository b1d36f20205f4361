import io

from setuptools import setup


def file_contents(path):
    with io.open(path, encoding="utf-8") as f:
        return f.read()


def file_lines(path):
    return [line for line in file_contents(path).split("\n") if line.strip()]


setup(
    name="weburl",
    url="https://github.com/weburl/weburl",
    description="Parse, resolve and format URLs like the browser's URL object",
    long_description=file_contents("README.rst"),
    version="1.0.0",
    packages=["weburl", "weburl.test"],
    python_requires=">=3.8",
    install_requires=file_lines("requirements/install.txt"),
    extras_require={"tests": file_lines("requirements/test.txt")},
    entry_points={"console_scripts": ["weburl = weburl.cmdline:main"]},
    include_package_data=True,
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="url uri parse resolve urlsearchparams",
)
