"""
Simple usage example for LifeOS

This demonstrates basic usage of the LifeOS agent.
Run this after installation to see LifeOS in action.
"""

import random

from lifeos import InMemoryStore, LifeOSAgent


def main():
    print("=" * 60)
    print("LifeOS Simple Example")
    print("=" * 60)
    print()

    # Seeded so the canned replies are the same every run
    agent = LifeOSAgent(store=InMemoryStore(), rng=random.Random(7))
    print(agent.get_greeting())
    print()

    # Example 1: Small talk and memory
    print("=" * 60)
    print("\n📝 Example 1: Telling LifeOS your name\n")
    for line in ("My name is Sam", "what's my name?"):
        print(f"You:    {line}")
        print(f"LifeOS: {agent.ask(line)}\n")

    # Example 2: Math
    print("=" * 60)
    print("\n🧮 Example 2: Math\n")
    for line in ("12 * 4", "what is 10 divided by 4", "square root of 81"):
        print(f"You:    {line}")
        print(f"LifeOS: {agent.ask(line)}\n")

    # Example 3: Reminders (answered from templates, stored in the gateway)
    print("=" * 60)
    print("\n⏰ Example 3: Reminders\n")
    for line in ("Remind me to call mom in 10 minutes", "show my reminders"):
        print(f"You:    {line}")
        print(f"LifeOS: {agent.ask(line)}\n")

    # Example 4: Farsi
    print("=" * 60)
    print("\n🌐 Example 4: Farsi\n")
    for line in ("سلام", "ساعت چنده؟"):
        print(f"You:    {line}")
        print(f"LifeOS: {agent.ask(line)}\n")

    print("=" * 60)
    print("\n📊 Session summary\n")
    print(agent.get_summary())
    print("\n✅ Examples complete!")


if __name__ == "__main__":
    main()
