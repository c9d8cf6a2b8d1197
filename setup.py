from setuptools import setup, find_packages

__version__ = "1.0.0"

requirements = [
    "fastapi",
    "dependency-injector>=4.0,<5.0",
    "jinja2",
    "markupsafe",
    "pydantic>=2.0",
    "uvicorn",
]

setup(
    name="vitesse",
    version=__version__,
    packages=find_packages(include=["vitesse", "vitesse.*"]),
    package_dir={"vitesse": "vitesse"},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "pytest",
            "pytest-mock",
            "httpx",
        ]
    },
)
