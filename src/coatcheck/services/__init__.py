"""Service layer — the attendant's policy and the scenario driver.

Services operate on domain objects and return ServiceResult to the CLI.
"""
