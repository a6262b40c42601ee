"""핵심 설정/인프라 (config, database, logging, security, exceptions)"""
