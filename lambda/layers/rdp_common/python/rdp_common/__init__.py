"""
Shared code for the RDP binary stream Lambda functions (deployed as a layer)
"""
