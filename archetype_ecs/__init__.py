"""Entity component system building blocks: scheduling, serialization, timing, transforms, reflection and resources."""

__version__ = "1.1.3"