"""Alertmanager webhook receiver that opens ServiceNow incidents."""
