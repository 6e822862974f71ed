"""Worker-wide constants."""

GREETING = "Hello from the web vitals ingest worker!"
