"""Mulykap Pointage package.

Organised by feature modules (agents, presences, auth) with a thin Flask
controller layer on top of service/repository layers.
"""
