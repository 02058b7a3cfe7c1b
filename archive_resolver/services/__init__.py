"""Services resolving archive content and listing workspace projects."""
