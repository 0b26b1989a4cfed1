from config.env import env_to_int

# SS58 network format used when rendering addresses (42 = generic Substrate)
SS58_FORMAT = env_to_int("SS58_FORMAT", 42, minimum=0, maximum=16383)
