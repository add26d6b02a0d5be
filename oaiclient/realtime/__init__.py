"""Realtime WebSocket client, event models and shared types."""