from setuptools import find_packages, setup

setup(
    name="jmxctl",
    version="0.1.0",
    description="Declarative JMX remote-monitoring configuration for Java services",
    packages=find_packages(include=["jmxctl", "jmxctl.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output schema validation
        "typer<0.26",  # CLI (0.26+ vendors its own click; code catches click exceptions)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "jinja2",  # Rendering of managed property files
        "PyYAML",  # YAML command output
        "cryptography",  # PEM parsing and PKCS#12 keystores
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "jmxctl=jmxctl.cli:main",
        ],
    },
)
