"""Servicios de aplicación: un módulo por comando."""
