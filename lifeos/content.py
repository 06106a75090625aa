"""Built-in content banks — canned replies, jokes, facts and offline knowledge"""

from types import MappingProxyType

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  ENGLISH SMALL TALK
# ═══════════════════════════════════════════════════════════════════════════════

HOW_ARE_YOU = (
    "I'm doing great, thank you! How about you?",
    "Wonderful! Ready to help. How are you?",
    "I'm running smoothly! What's on your mind?",
    "Fantastic! Thanks for asking. What can I help with?",
)

USER_IS_FINE = (
    "Great to hear! What can I do for you?",
    "Awesome! How can I help today?",
    "Glad you're well!",
)

THANKS_REPLIES = (
    "You're welcome! 😊",
    "Happy to help!",
    "Anytime!",
    "Glad I could help!",
    "No problem!",
)

COMPLIMENT_REPLIES = (
    "Thank you! I do my best! 💪",
    "That's very kind!",
    "I appreciate that!",
    "Thanks! I'm always learning!",
)

GOODBYE_REPLIES = (
    "Goodbye! Have a wonderful day! 👋",
    "See you later!",
    "Take care!",
    "Bye! Come back anytime!",
)

YES_REPLIES = (
    "Great! What would you like to do?",
    "Alright! How can I help?",
    "Perfect!",
)

NO_REPLIES = (
    "Okay! Let me know if you need anything.",
    "No problem! I'm here.",
    "Alright!",
)

TONGUE_TWISTERS = (
    "Try this: 'She sells seashells by the seashore!'",
    "How about: 'Peter Piper picked a peck of pickled peppers!'",
    "Try: 'How much wood would a woodchuck chuck if a woodchuck could chuck wood?'",
    "Say fast: 'Red lorry, yellow lorry, red lorry, yellow lorry!'",
)

IDENTITY = (
    "I'm LifeOS, your personal offline AI assistant! I run completely on your device "
    "for total privacy. I understand English and Farsi."
)

CAPABILITIES = (
    "I can help with:\n"
    "• Time & date\n"
    "• Math calculations\n"
    "• General knowledge\n"
    "• Jokes, facts & stories\n"
    "• Motivation & advice\n"
    "• Conversations in English & Farsi\n"
    "• Remembering your name\n"
    "\n"
    "Just ask me anything!"
)

CREATOR = (
    "I was created as an open-source offline AI assistant. I run locally on your "
    "phone with complete privacy!"
)

WELCOME = (
    "{greeting} I'm LifeOS, your offline assistant. I speak English and Farsi. "
    "How can I help you today?"
)

WEATHER_OFFLINE = (
    "I'm running fully offline, so I can't check live weather. Try a weather app! "
    "But I can tell you the current time if that helps."
)

FARSI_PHRASES = (
    "Here are some useful Farsi phrases:\n"
    "• Hello = سلام (Salaam)\n"
    "• Thank you = ممنون (Mamnoon)\n"
    "• How are you? = حالت چطوره؟ (Halet chetore?)\n"
    "• Goodbye = خداحافظ (Khodahafez)\n"
    "• Yes = بله (Baleh)\n"
    "• No = نه (Na)"
)

TRANSLATE_TO_ENGLISH = (
    "I can help with basic translations! Tell me a phrase and which language you'd like it in."
)

# ── Emotions ─────────────────────────────────────────────────────────────────
SAD = (
    "I'm sorry to hear that. Remember, it's okay to not be okay. Take a deep breath, "
    "and know that things will get better. Would you like to hear a joke or a "
    "motivational quote?"
)
HAPPY = "That's wonderful to hear! 🎉 What's making you happy?"
BORED = (
    "Let me help! I can tell you a joke, an interesting fact, a story, or give you a "
    "motivational quote. What sounds good?"
)
TIRED = (
    "Make sure to rest well! Here's a tip: try the 4-7-8 breathing technique — breathe "
    "in for 4 seconds, hold for 7, breathe out for 8. It really helps!"
)
ANGRY = (
    "I understand frustration. Try taking a few deep breaths. Sometimes stepping away "
    "for a moment helps. Want to talk about what's bothering you?"
)
LOVE = "That's so sweet! I appreciate you too! 😊"
FUNNY = "Haha, glad you think so! Want to hear another joke? 😄"

# ── Follow-ups ───────────────────────────────────────────────────────────────
ELABORATE = (
    "Could you tell me what topic you'd like me to elaborate on? I want to give you "
    "the best answer!"
)
NOTHING_SAID_YET = "I don't recall saying anything yet."
NEED_CONTEXT = "Could you give me more context? What specifically would you like to know about?"

# ── Memory recall ────────────────────────────────────────────────────────────
NAME_KNOWN = "Your name is {name}! 😊"
NAME_UNKNOWN = "You haven't told me your name yet. What should I call you?"
NOTHING_KNOWN = "I don't know much about you yet. Tell me about yourself!"

# ── Math replies ─────────────────────────────────────────────────────────────
MATH_NEED_NUMBER = "Please specify a number. Example: 'square root of 16'"
MATH_NEED_TWO_NUMBERS = "I need two numbers. Try: 'what is 5 plus 3' or '12 * 4'"
MATH_DIVIDE_BY_ZERO = "Can't divide by zero!"
MATH_TROUBLE = "I had trouble with that math. Try: '10 plus 5' or '12 * 3'"


# ═══════════════════════════════════════════════════════════════════════════════
# § 2  ENTERTAINMENT
# ═══════════════════════════════════════════════════════════════════════════════

JOKES = (
    "Why do programmers prefer dark mode? Because light attracts bugs! 😄",
    "Why was the computer cold? It left its Windows open! 🥶",
    "What do you call a fake noodle? An impasta! 🍝",
    "Why don't scientists trust atoms? They make up everything! ⚛️",
    "What did the ocean say to the beach? Nothing, it just waved! 🌊",
    "Why did the scarecrow win an award? He was outstanding in his field! 🌾",
    "What do you call a bear with no teeth? A gummy bear! 🐻",
    "Why don't eggs tell jokes? They'd crack each other up! 🥚",
    "I told my wife she was drawing her eyebrows too high. She looked surprised! 😮",
    "What do you call a dog that does magic? A Labracadabrador! 🐕",
    "Why did the bicycle fall over? It was two tired! 🚲",
    "What do you call a sleeping dinosaur? A dino-snore! 🦕",
    "Why can't you give Elsa a balloon? Because she'll let it go! ❄️",
    "What do you call cheese that isn't yours? Nacho cheese! 🧀",
    "Why did the math book look so sad? It had too many problems! 📚",
)

FACTS = (
    "Honey never spoils. 3000-year-old honey was found still edible! 🍯",
    "Octopuses have three hearts and blue blood! 🐙",
    "A group of flamingos is called a 'flamboyance'! 🦩",
    "Bananas are berries, but strawberries aren't! 🍌",
    "The human brain uses about 20% of the body's energy! 🧠",
    "There are more possible chess games than atoms in the observable universe! ♟️",
    "A day on Venus is longer than its year! 🪐",
    "Cats have over 20 different vocalizations! 🐱",
    "The Eiffel Tower grows about 6 inches in summer due to heat expansion! 🗼",
    "Dolphins sleep with one eye open! 🐬",
    "The shortest war lasted 38 minutes (Britain vs Zanzibar, 1896)! ⚔️",
    "Your body contains about 37.2 trillion cells! 🔬",
    "Lightning strikes Earth about 100 times per second! ⚡",
    "The human nose can detect over 1 trillion scents! 👃",
    "Sharks existed before trees! They've been around for 400 million years! 🦈",
)

MOTIVATION = (
    "\"The only way to do great work is to love what you do.\" - Steve Jobs 💪",
    "\"Believe you can and you're halfway there.\" - Theodore Roosevelt ✨",
    "\"Every expert was once a beginner.\" Keep going! 📚",
    "\"Your limitation is only your imagination.\" Dream big! 🚀",
    "\"Success is not final, failure is not fatal: courage to continue is what counts.\" - Churchill 🌟",
    "\"The best time to plant a tree was 20 years ago. The second best time is now.\" 🌳",
    "\"Don't watch the clock; do what it does. Keep going.\" ⏰",
    "\"It does not matter how slowly you go as long as you do not stop.\" - Confucius 🏃",
    "\"The future belongs to those who believe in the beauty of their dreams.\" - Eleanor Roosevelt 🌈",
    "\"You are never too old to set another goal or dream a new dream.\" - C.S. Lewis 🎯",
)

STORIES = (
    "Once upon a time, an AI named LifeOS lived in a phone. Every day it helped its owner "
    "— telling time, solving math, and sharing jokes. One day, the owner said 'You're the "
    "best assistant ever!' LifeOS replied, 'I learned from the best — you!' They lived "
    "happily ever after. 📖",
    "In a digital kingdom, there was a wise assistant who spoke both English and Farsi. "
    "People from everywhere asked it questions. It always answered with kindness and humor. "
    "The kingdom prospered because knowledge was freely shared. 🏰",
    "A curious kid once asked their phone, 'Can you think?' The AI replied, 'I can process, "
    "learn, and help, but the most beautiful thinking comes from humans who dream of a "
    "better world.' The kid smiled and said, 'Then let's dream together!' 🌍",
)

RIDDLES = (
    "Riddle: I have cities but no houses, forests but no trees, and water but no fish. "
    "What am I? 🤔\n\n(Answer: A map!)",
    "Riddle: What has hands but can't clap? 🤔\n\n(Answer: A clock!)",
    "Riddle: What gets wetter the more it dries? 🤔\n\n(Answer: A towel!)",
    "Riddle: I speak without a mouth and hear without ears. I have no body, but I come "
    "alive with the wind. What am I? 🤔\n\n(Answer: An echo!)",
)

TRIVIA = (
    "Trivia: What is the largest planet in our solar system?\n\nAnswer: Jupiter! It's so "
    "big that over 1,300 Earths could fit inside it! 🪐",
    "Trivia: What is the hardest natural substance on Earth?\n\nAnswer: Diamond! It scores "
    "10 on the Mohs hardness scale. 💎",
    "Trivia: How many bones does an adult human have?\n\nAnswer: 206! Babies are born with "
    "about 270, but some fuse together. 🦴",
    "Trivia: What is the fastest land animal?\n\nAnswer: The cheetah, reaching speeds up to "
    "120 km/h (75 mph)! 🐆",
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 3  ADVICE, HOW-TO, WHY, LISTS
# ═══════════════════════════════════════════════════════════════════════════════
# Each table is (trigger words, reply); the first entry with any trigger
# present in the input wins. A trigger tuple of tuples means "all of".

ADVICE = (
    (("health", "exercise", "fit"),
     "Health tips: Stay hydrated (8 glasses/day), exercise 30min daily, eat more vegetables, "
     "get 7-8 hours sleep, take screen breaks every hour!"),
    (("work", "career", "job"),
     "Career advice: Never stop learning, build genuine relationships, focus on solving "
     "problems, ask for feedback, and don't be afraid of failure!"),
    (("relationship", "friend"),
     "Relationship tips: Communicate openly, listen actively, show appreciation, give space "
     "when needed, and remember that quality matters more than quantity."),
    (("stress", "relax", "anxiety"),
     "Stress relief: Try deep breathing (4-7-8 method), go for a walk in nature, limit "
     "news/social media, talk to someone you trust, and remember — this too shall pass."),
)
ADVICE_DEFAULT = (
    "General wisdom: Stay curious, be kind, learn something new daily, take care of your "
    "health, and don't compare your journey to others. You're doing great! 🌟"
)

HOW_TO = (
    (("learn", "study"),
     "Effective learning tips:\n1. Break topics into small chunks\n2. Practice actively, not "
     "just reading\n3. Use spaced repetition\n4. Teach what you learn to others\n5. Take "
     "regular breaks (Pomodoro: 25min work, 5min break)"),
    (("sleep", "insomnia"),
     "Better sleep tips:\n1. Keep a consistent schedule\n2. No screens 1 hour before bed\n"
     "3. Keep room cool (18-20°C) and dark\n4. No caffeine after 2pm\n5. Try the 4-7-8 "
     "breathing technique"),
    (("save money", "budget"),
     "Money tips:\n1. Track all spending for a month\n2. Follow 50/30/20 rule "
     "(needs/wants/savings)\n3. Cook at home more\n4. Cancel unused subscriptions\n5. Set up "
     "automatic savings"),
    (("happy", "happiness"),
     "Happiness tips:\n1. Practice daily gratitude\n2. Exercise regularly\n3. Connect with "
     "loved ones\n4. Spend time in nature\n5. Help others\n6. Limit social media"),
    (("focus", "concentrate", "productive"),
     "Focus tips:\n1. Remove distractions (phone on silent)\n2. Use Pomodoro technique\n"
     "3. Prioritize top 3 tasks daily\n4. Take breaks every 90 minutes\n5. Exercise and "
     "sleep well"),
    (("cook", "recipe"),
     "Cooking basics:\n1. Start with simple recipes\n2. Read the entire recipe first\n"
     "3. Prep all ingredients before cooking\n4. Season gradually and taste often\n5. Don't "
     "be afraid to experiment!"),
    (("meditat",),
     "Meditation basics:\n1. Find a quiet spot\n2. Sit comfortably, close your eyes\n3. Focus "
     "on your breath\n4. When your mind wanders, gently return focus\n5. Start with 5 "
     "minutes, increase gradually"),
)
HOW_TO_DEFAULT = (
    "Great question! While I have tips on common topics like studying, sleeping, cooking, "
    "meditation, and productivity, I might not have specific how-to guides for everything. "
    "Try asking about a common topic!"
)

WHY = (
    ((("sky",), ("blue",)),
     "The sky appears blue because Earth's atmosphere scatters short-wavelength blue light "
     "from the sun more than other colors. This is called Rayleigh scattering."),
    ((("sun",), ("rise", "set")),
     "The Sun appears to rise and set because Earth rotates on its axis once every 24 hours. "
     "It's actually the Earth moving, not the Sun!"),
    ((("dream",),),
     "We dream during REM sleep. Scientists believe dreams help process emotions, "
     "consolidate memories, and work through problems. The average person has 3-5 dreams "
     "per night."),
    ((("yawn",),),
     "Yawning may help cool the brain and increase alertness. It's contagious likely due to "
     "social empathy — seeing someone yawn triggers mirror neurons."),
    ((("important",), ("water",)),
     "Water is vital because it regulates body temperature, transports nutrients, removes "
     "waste, cushions organs, and is involved in nearly every bodily function. We're about "
     "60% water!"),
)
WHY_DEFAULT = (
    "That's a thoughtful question! I have answers for common 'why' questions. Try asking "
    "about natural phenomena, the human body, or everyday things!"
)

COMPARISON = (
    "Great comparison question! For detailed comparisons, I'd need more comprehensive "
    "knowledge. I can help with basic topics — try asking about specific things like "
    "'what is X' or 'how to Y'."
)

LISTS = (
    (("planet",),
     "The 8 planets:\n1. Mercury\n2. Venus\n3. Earth\n4. Mars\n5. Jupiter\n6. Saturn\n"
     "7. Uranus\n8. Neptune"),
    (("continent",),
     "The 7 continents:\n1. Asia\n2. Africa\n3. North America\n4. South America\n"
     "5. Antarctica\n6. Europe\n7. Australia/Oceania"),
    (("ocean",),
     "The 5 oceans:\n1. Pacific\n2. Atlantic\n3. Indian\n4. Southern\n5. Arctic"),
    (("color", "rainbow"),
     "Rainbow colors (ROYGBIV):\n1. Red\n2. Orange\n3. Yellow\n4. Green\n5. Blue\n6. Indigo\n"
     "7. Violet"),
    (("programming", "language"),
     "Popular programming languages:\n1. Python\n2. JavaScript\n3. Java\n4. C/C++\n5. Kotlin\n"
     "6. Swift\n7. Go\n8. Rust"),
)
LISTS_DEFAULT = (
    "I can list planets, continents, oceans, rainbow colors, and programming languages! "
    "What list would you like?"
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 4  OFFLINE KNOWLEDGE — first key contained in the topic wins
# ═══════════════════════════════════════════════════════════════════════════════

KNOWLEDGE_BASE = MappingProxyType({
    "ai": (
        "Artificial Intelligence (AI) is the simulation of human intelligence by computers. "
        "It includes machine learning, natural language processing, computer vision, and more."
    ),
    "artificial intelligence": (
        "AI is technology that enables computers to simulate human intelligence — learning, "
        "reasoning, problem-solving, and understanding language."
    ),
    "machine learning": (
        "Machine Learning is a subset of AI where computers learn from data without being "
        "explicitly programmed. It includes supervised, unsupervised, and reinforcement learning."
    ),
    "android": (
        "Android is Google's mobile operating system based on Linux. It's the most popular "
        "mobile OS worldwide, running on phones, tablets, watches, and TVs."
    ),
    "python": (
        "Python is a popular programming language known for simplicity and readability. It's "
        "widely used in AI, web development, data science, and automation."
    ),
    "java": (
        "Java is a popular object-oriented programming language known for its 'write once, run "
        "anywhere' philosophy. It's used for Android apps, enterprise software, and more."
    ),
    "kotlin": (
        "Kotlin is a modern programming language that runs on the JVM. It's the preferred "
        "language for Android development, offering concise and safe code."
    ),
    "internet": (
        "The Internet is a global network connecting billions of devices. It was developed from "
        "ARPANET in the late 1960s and has transformed communication, commerce, and information "
        "sharing."
    ),
    "gravity": (
        "Gravity is a fundamental force that attracts objects with mass toward each other. On "
        "Earth, it accelerates objects at about 9.8 m/s². Einstein described it as the "
        "curvature of spacetime."
    ),
    "dna": (
        "DNA (Deoxyribonucleic Acid) is the molecule carrying genetic instructions for life. It "
        "has a double helix structure discovered by Watson and Crick in 1953."
    ),
    "blockchain": (
        "Blockchain is a distributed ledger technology that records transactions across "
        "multiple computers. It's the foundation of cryptocurrencies like Bitcoin and enables "
        "trustless systems."
    ),
    "bitcoin": (
        "Bitcoin is the first cryptocurrency, created in 2009 by the pseudonymous Satoshi "
        "Nakamoto. It uses blockchain technology for decentralized digital payments."
    ),
    "solar system": (
        "Our Solar System has 8 planets orbiting the Sun: Mercury, Venus, Earth, Mars, Jupiter, "
        "Saturn, Uranus, and Neptune. It also includes dwarf planets, moons, asteroids, and comets."
    ),
    "moon": (
        "The Moon is Earth's only natural satellite, about 384,400 km away. It influences tides "
        "and has been visited by humans 6 times during the Apollo missions (1969-1972)."
    ),
    "sun": (
        "The Sun is a G-type main-sequence star at the center of our Solar System. It's about "
        "4.6 billion years old and its core temperature reaches about 15 million °C."
    ),
    "photosynthesis": (
        "Photosynthesis is the process by which plants convert sunlight, water, and CO2 into "
        "glucose and oxygen. It's essential for life on Earth."
    ),
    "evolution": (
        "Evolution is the process by which species change over time through natural selection. "
        "Charles Darwin published 'On the Origin of Species' in 1859."
    ),
    "atom": (
        "An atom is the smallest unit of matter. It consists of protons and neutrons in a "
        "nucleus, surrounded by orbiting electrons."
    ),
    "water": (
        "Water (H2O) is essential for all life. It covers about 71% of Earth's surface. It "
        "freezes at 0°C and boils at 100°C at standard pressure."
    ),
    "electricity": (
        "Electricity is the flow of electric charge, typically through conductors. It powers "
        "modern civilization and was harnessed commercially in the late 1800s."
    ),
    "computer": (
        "A computer is an electronic device that processes data using programs. Modern "
        "computers evolved from room-sized machines in the 1940s to today's smartphones."
    ),
    "love": (
        "Love is a complex emotion involving deep affection, attachment, and care. It's one of "
        "the most fundamental human experiences, studied by psychology, neuroscience, and "
        "philosophy."
    ),
})
KNOWLEDGE_MISSING = (
    "That's an interesting topic! I have basic knowledge built-in. For more detailed answers "
    "about '{topic}', you could try searching online."
)

PEOPLE = MappingProxyType({
    "einstein": (
        "Albert Einstein (1879-1955) was a theoretical physicist who developed the theory of "
        "relativity. He won the Nobel Prize in Physics in 1921."
    ),
    "newton": (
        "Isaac Newton (1643-1727) was an English physicist and mathematician who formulated the "
        "laws of motion and universal gravitation."
    ),
    "tesla": (
        "Nikola Tesla (1856-1943) was a Serbian-American inventor known for his contributions to "
        "AC electricity, the Tesla coil, and wireless technology."
    ),
    "elon musk": (
        "Elon Musk is a business magnate known for leading Tesla, SpaceX, and other companies. "
        "He's one of the world's wealthiest people."
    ),
    "steve jobs": (
        "Steve Jobs (1955-2011) co-founded Apple and revolutionized personal computing, phones "
        "(iPhone), and digital music (iPod/iTunes)."
    ),
    "bill gates": (
        "Bill Gates co-founded Microsoft and helped bring personal computers to the masses. He's "
        "now known for his philanthropic work through the Gates Foundation."
    ),
})
PERSON_MISSING = (
    "I don't have detailed information about '{person}' in my offline knowledge base. For "
    "biographies, I'd recommend searching online."
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 5  FALLBACK PROMPTS — "{greeting}" is the remembered name plus ", " or empty
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_QUESTION = (
    "{greeting}That's a great question! I have knowledge about common topics like science, "
    "tech, math, and life tips. Try rephrasing or asking something more specific!",
    "{greeting}Interesting question! I work best with topics like time, math, facts, jokes, "
    "advice, and general knowledge. What else can I help with?",
    "{greeting}I'd love to help! Try asking me about something specific — like a fact, a "
    "joke, the time, or how to do something.",
)

DEFAULT_STATEMENT = (
    "{greeting}I hear you! I'm great at answering questions, telling jokes, doing math, and "
    "sharing facts. What would you like to try?",
    "{greeting}Interesting! Want me to tell you a joke, share a fun fact, or help with "
    "something specific?",
    "{greeting}Got it! Ask me anything — I know about time, math, science, and I have plenty "
    "of jokes! 😊",
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 6  FARSI CONVERSATION
# ═══════════════════════════════════════════════════════════════════════════════

FA_GREETINGS = (
    "سلام! چطور می‌تونم کمکتون کنم؟",
    "سلام! من لایف‌اواس هستم. در خدمتم!",
    "درود! چه کاری از دستم بر میاد؟",
)

FA_HOW_ARE_YOU = (
    "ممنون، عالیم! شما چطورید؟",
    "خیلی خوبم! چه کمکی می‌تونم بکنم؟",
    "عالی! ممنون که پرسیدید.",
)

FA_IDENTITY = (
    "من لایف‌اواس هستم، دستیار هوشمند آفلاین شما! کاملاً روی گوشی شما اجرا می‌شم و "
    "اطلاعاتتون خصوصی می‌مونه."
)

FA_CAPABILITIES = (
    "من می‌تونم کمکتون کنم در:\n"
    "• ساعت و تاریخ\n"
    "• محاسبات ریاضی\n"
    "• جوک و حقایق جالب\n"
    "• مکالمه به فارسی و انگلیسی\n"
    "• انگیزشی و نصیحت\n"
    "\n"
    "هر سوالی دارید بپرسید!"
)

FA_THANKS = (
    "خواهش می‌کنم! 😊",
    "کاری نکردم!",
    "خوشحالم که تونستم کمک کنم!",
    "قابلی نداشت!",
)

FA_GOODBYE = (
    "خداحافظ! روز خوبی داشته باشید! 👋",
    "به سلامت!",
    "خداحافظ! هر وقت نیاز داشتید اینجام.",
)

FA_JOKES = (
    "چرا برنامه‌نویس‌ها حالت تاریک رو دوست دارن؟ چون نور حشرات رو جذب می‌کنه! 😄",
    "به یه ماهی گفتن حالت چطوره؟ گفت دمم گرمه! 🐟",
    "معلم پرسید: آب در چند درجه یخ می‌زنه؟ شاگرد: نمی‌دونم، آب ما هنوز یخ نزده! ❄️",
    "دکتر به مریض میگه: شما باید ورزش کنید. مریض میگه: دکتر، من هر روز دیر به اتوبوس می‌رسم! 🏃",
    "به یه مداد گفتن چرا ناراحتی؟ گفت نوکم تیز شده! ✏️",
)

FA_FACTS = (
    "می‌دونستید عسل هیچوقت فاسد نمیشه؟ عسل ۳۰۰۰ ساله هم خوردنی پیدا شده! 🍯",
    "اختاپوس سه تا قلب داره و خونش آبیه! 🐙",
    "موز از نظر گیاه‌شناسی یک توت‌فرنگی محسوب میشه! 🍌",
    "مغز انسان حدود ۲۰ درصد انرژی بدن رو مصرف می‌کنه! 🧠",
)

FA_MOTIVATION = (
    "«تنها راه انجام کار بزرگ، دوست داشتن کاری است که انجام می‌دهید.» - استیو جابز 💪",
    "«باور داشته باش که می‌توانی، نیمی از راه را رفته‌ای.» - تئودور روزولت ✨",
    "«هر استادی روزی مبتدی بوده.» ادامه بده! 📚",
    "«موفقیت نهایی نیست، شکست کشنده نیست. شجاعت ادامه دادن مهم است.» - چرچیل 🌟",
)

FA_WEATHER_OFFLINE = "من آفلاین کار می‌کنم و نمی‌تونم آب و هوا رو چک کنم. یه اپ هواشناسی رو امتحان کنید!"

FA_STORY = (
    "یکی بود یکی نبود، یه دستیار هوشمند به نام لایف‌اواس توی یه گوشی زندگی می‌کرد. هر روز "
    "به صاحبش کمک می‌کرد، جوک می‌گفت و چیزای جدید یاد می‌گرفت. هرچند کوچیک بود، ولی آرزو "
    "داشت باهوش‌ترین دستیار دنیا بشه! 📖"
)

FA_SAD = "متأسفم که اینو می‌شنوم. یادت باشه که هر مشکلی راه حلی داره. نفس عمیق بکش و بدون که همه چیز درست میشه. 💙"
FA_TIRED = "استراحت کن! یه نکته: تکنیک تنفس ۴-۷-۸ رو امتحان کن. ۴ ثانیه نفس بکش، ۷ ثانیه نگه دار، ۸ ثانیه بیرون بده."
FA_BORED = "بیا سرگرمت کنم! می‌تونم جوک بگم، حقیقت جالب بگم، داستان تعریف کنم، یا یه جمله انگیزشی بگم. چی دوست داری؟"
FA_COIN_SIDES = ("شیر!", "خط!")

FA_FALLBACK = (
    "شما گفتید: \"{text}\"\n\n"
    "من هنوز دارم یاد می‌گیرم! سوالات ساده‌تر بپرسید یا از من جوک، ساعت، تاریخ، یا حقایق جالب بخواید."
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 7  TEMPLATE REPLIES (intent-driven regime)
# ═══════════════════════════════════════════════════════════════════════════════

TEMPLATES = MappingProxyType({
    "en": MappingProxyType({
        "greeting": (
            "Hello! How can I help you today?",
            "Hi there! What can I do for you?",
            "Hey! Ready to assist you.",
            "Greetings! How may I help?",
        ),
        "goodbye": (
            "Goodbye! Have a great day!",
            "See you later! Take care!",
            "Bye! Come back anytime!",
            "Farewell! Have a wonderful day!",
        ),
        "thanks": (
            "You're welcome!",
            "Happy to help!",
            "Anytime!",
            "Glad I could assist!",
            "No problem at all!",
        ),
        "unknown": (
            "I'm not sure I understand. Could you rephrase that?",
            "I didn't catch that. Can you say it differently?",
            "Sorry, I don't understand. Try asking about time, weather, or reminders.",
            "I'm still learning. Can you try asking something else?",
        ),
        "help": (
            "I can help you with:\n"
            "• Time and date\n"
            "• Setting reminders\n"
            "• Taking notes\n"
            "• Calculations\n"
            "• Basic questions\n"
            "Just speak naturally!",
            "Here's what I can do:\n"
            "• Tell you the time\n"
            "• Set reminders\n"
            "• Save notes\n"
            "• Do math\n"
            "Try saying 'What time is it?' or 'Remind me to...'",
        ),
    }),
    "fa": MappingProxyType({
        "greeting": (
            "سلام! چطور می‌توانم کمک کنم؟",
            "درود! چه کاری می‌توانم انجام دهم؟",
            "سلام! آماده کمک هستم.",
        ),
        "goodbye": (
            "خداحافظ! روز خوبی داشته باشید!",
            "به سلامت! مراقب خود باشید!",
            "خداحافظ! هر وقت خواستید برگردید!",
        ),
        "thanks": (
            "خواهش می‌کنم!",
            "خوشحالم که کمک کردم!",
            "در خدمتم!",
            "اشکالی ندارد!",
        ),
        "unknown": (
            "متوجه نشدم. می‌توانید دوباره بگویید؟",
            "نفهمیدم. لطفاً با کلمات دیگری بگویید.",
            "ببخشید، نمی‌فهمم. درباره زمان، یادآوری یا یادداشت بپرسید.",
        ),
        "help": (
            "می‌توانم در این موارد کمک کنم:\n"
            "• گفتن ساعت و تاریخ\n"
            "• تنظیم یادآوری\n"
            "• نوشتن یادداشت\n"
            "• محاسبات\n"
            "• سوالات ساده\n"
            "طبیعی صحبت کنید!",
        ),
    }),
})

# Fixed per-language strings of the template regime
MESSAGES = MappingProxyType({
    "en": MappingProxyType({
        "time": "The current time is {time}.",
        "date": "Today is {date}.",
        "weather": (
            "Sorry, I don't have internet access to get weather information. "
            "I'm an offline assistant!"
        ),
        "reminder_set": "Reminder set: {content}",
        "reminder_list": "Your reminders:\n{items}",
        "reminder_none": "You have no reminders.",
        "note_set": "Note saved: {content}",
        "note_list": "Your notes:\n{items}",
        "note_none": "You have no notes.",
        "calc_result": "The result is {result}",
        "calc_failed": "I couldn't calculate that.",
        "calc_zero": "I can't divide by zero.",
        "translation": "Translation: {text} (Internet connection needed for accurate translation)",
        "error": "Sorry, something went wrong. Please try again.",
    }),
    "fa": MappingProxyType({
        "time": "ساعت الان {time} است.",
        "date": "امروز {date} است.",
        "weather": "ببخشید، من به اینترنت دسترسی ندارم و نمی‌توانم اطلاعات آب و هوا را بگیرم.",
        "reminder_set": "یادآوری تنظیم شد: {content}",
        "reminder_list": "یادآوری‌های شما:\n{items}",
        "reminder_none": "هیچ یادآوری ندارید.",
        "note_set": "یادداشت ذخیره شد: {content}",
        "note_list": "یادداشت‌های شما:\n{items}",
        "note_none": "هیچ یادداشتی ندارید.",
        "calc_result": "نتیجه: {result}",
        "calc_failed": "نمی‌توانم این محاسبه را انجام دهم.",
        "calc_zero": "نمی‌توانم بر صفر تقسیم کنم.",
        "translation": "ترجمه: {text} (نیاز به اتصال اینترنت برای ترجمه دقیق)",
        "error": "متأسفانه خطایی رخ داد. لطفاً دوباره امتحان کنید.",
    }),
})
