"""owo.runtime – admission gate, reader pool, driver and config wiring."""
