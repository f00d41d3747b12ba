"""
Simple merchant usage example (server-side). Initializes a checkout, then
verifies the transaction once the customer returns to the callback URL.
"""
import asyncio

from paystack_sdk import Paystack


async def run():
    # PAYSTACK_SECRET_KEY must hold your sk_test_ key
    async with Paystack() as paystack:
        result = await paystack.transaction.initialize(
            {"amount": "50000", "email": "customer@example.com", "currency": "NGN"}
        )
        if not result.ok:
            print("Unexpected response:", result.error)
            return
        if not result.data.status:
            print("Paystack rejected the request:", result.data.message)
            return

        checkout = result.data.data
        print("Send the customer to:", checkout.authorization_url)

        verified = await paystack.transaction.verify(checkout.reference)
        print("Status:", verified.data.data.status if verified.ok else verified.error)


if __name__ == "__main__":
    asyncio.run(run())
