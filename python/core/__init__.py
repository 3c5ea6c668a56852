"""MySite HTTP server core: config, wire schemas, routers and the translation client."""
