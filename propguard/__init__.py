"""propguard — property validation with hex-dump diagnostics."""
