"""
Backend checkout: création de commande Razorpay et email de confirmation de commande.
"""
