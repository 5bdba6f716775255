"""
Restaurant listing import for the front-end map application.

Responsibilities:
- Read the restaurant listings CSV and split it into rows of fields.
- Normalize operating hours, price range, rating and placeholder coordinates.
- Persist the records as a JSON document the front-end can load directly.
"""
