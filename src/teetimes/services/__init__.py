"""Services for the tee times application."""
