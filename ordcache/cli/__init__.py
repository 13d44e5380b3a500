"""Command line entry points for ordcache."""
