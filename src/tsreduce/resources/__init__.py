"""Bundled resources distributed with tsreduce."""
