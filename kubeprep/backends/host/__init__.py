"""Host provisioning actions."""
