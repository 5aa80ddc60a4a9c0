"""jmxctl - declarative JMX remote-monitoring configuration for Java services."""
