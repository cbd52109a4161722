"""Spot market domain, in-memory repository, service, wire mapper and request handler."""