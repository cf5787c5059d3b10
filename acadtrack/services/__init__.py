"""Credential and activity stores."""
