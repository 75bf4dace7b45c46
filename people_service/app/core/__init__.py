"""Cross-cutting pieces shared by both protocol adapters: settings and logging."""
