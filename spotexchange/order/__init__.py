"""Order domain, wire mappers, in-memory order repository and market lookup client."""