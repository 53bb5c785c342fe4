"""Resource types, handles, memory pooling, file loading and management."""