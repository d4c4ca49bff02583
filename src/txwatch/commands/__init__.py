"""
Command implementations for the txwatch CLI.

- submit:     Submit a signed transaction
- tx-info:    Show whether a transaction is verified
- ethop-info: Show executed/verified for a priority operation
- account:    Show account state
- wait:       Poll until a transaction is verified
- events:     List stored block events
"""
