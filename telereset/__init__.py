"""telereset - client for the editor machine-ID telemetry reset backend."""
