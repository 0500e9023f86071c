"""Feature packages: request dispatch and the endpoint catalog."""
