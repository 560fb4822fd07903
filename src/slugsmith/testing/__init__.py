"""Testing – fakes for exercising slug lifecycles without a database."""
