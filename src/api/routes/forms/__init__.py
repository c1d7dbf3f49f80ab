"""Endpoints de recebimento de formulários."""
