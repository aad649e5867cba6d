all_techniques = {
    "submission": {
        "items": {
            "rnc": {
                "name": "Rear-Naked Choke",
                "aliases": ["Mata Leão", "RNC"],
                "subcategory": "choke",
                "difficulty": "fundamental",
                "description": "Applied from back control without using the gi. One arm wraps around the opponent's neck while the other arm reinforces the choke. The highest-percentage submission in competition.",
                "key_points": [
                    "Get your choking arm deep under the chin",
                    "Place your hand on your bicep",
                    "Use your other hand behind their head",
                    "Squeeze your elbows together, not your hands",
                ],
                "starting_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["back-control", "body-triangle"],
            },
            "triangle-choke": {
                "name": "Triangle Choke",
                "aliases": ["Sankaku Jime"],
                "subcategory": "choke",
                "difficulty": "fundamental",
                "description": "Uses the legs to create a triangle shape around the opponent's neck and one arm, cutting off blood flow through the carotid arteries. Can be applied from guard, mount, or side control.",
                "key_points": [
                    "Control one arm in, one arm out",
                    "Lock the triangle high on their neck",
                    "Pull their head down",
                    "Angle off to the side for better squeeze",
                ],
                "starting_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["armbar", "omoplata"],
            },
            "guillotine": {
                "name": "Guillotine Choke",
                "subcategory": "choke",
                "difficulty": "fundamental",
                "description": "Front-facing choke typically applied when opponent shoots for takedown or has poor posture in guard. Multiple variations include arm-in, high-elbow, and power guillotine.",
                "key_points": [
                    "Wrap arm around neck, chin in elbow pit",
                    "Grip hands together (gable or RNC grip)",
                    "Close guard or butterfly hooks",
                    "Arch back and squeeze",
                ],
                "starting_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "darce-choke": {
                "name": "D'Arce Choke",
                "aliases": ["Brabo Choke"],
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "A front headlock choke where the attacker threads their arm under the opponent's neck and through their own armpit. Effective from turtle, half guard top, and front headlock.",
                "key_points": [
                    "Thread arm under neck and through armpit",
                    "Create figure-four configuration",
                    "Walk hips toward their head",
                    "Squeeze and sprawl",
                ],
                "starting_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "anaconda-choke": {
                "name": "Anaconda Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Similar to D'Arce but with arm threaded in opposite direction. Applied from front headlock or sprawl positions.",
                "key_points": [
                    "Arm goes over their arm, under neck",
                    "Gable grip behind their shoulder",
                    "Roll to the choking side",
                    "Finish on your side",
                ],
                "starting_position": "turtle",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "ezekiel-choke": {
                "name": "Ezekiel Choke",
                "aliases": ["Sode Guruma Jime"],
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Unique choke that can be applied from inside closed guard (top). Uses the sleeve of the gi to create pressure across the neck. No-gi version uses fist.",
                "key_points": [
                    "Feed hand deep into collar",
                    "Other hand grabs inside sleeve",
                    "Rotate wrist to apply pressure",
                    "Drive forearm across throat",
                ],
                "starting_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "arm-triangle": {
                "name": "Arm Triangle Choke",
                "aliases": ["Head and Arm Choke", "Kata Gatame"],
                "subcategory": "choke",
                "difficulty": "fundamental",
                "description": "Applied from side control or mount, using opponent's own arm to assist in the choke by trapping it against their neck.",
                "key_points": [
                    "Trap their arm against their neck",
                    "Connect hands behind their head",
                    "Walk to the trapped arm side",
                    "Sprawl and squeeze",
                ],
                "starting_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "north-south-choke": {
                "name": "North-South Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Applied from north-south position using shoulder pressure and arm positioning to create the strangle.",
                "key_points": [
                    "Arm wraps around neck",
                    "Drive shoulder into neck",
                    "Walk hips away",
                    "Turn hip into their face",
                ],
                "starting_position": "north-south",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "bow-arrow": {
                "name": "Bow and Arrow Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Applied from back control using opponent's collar and pant leg to create a bow-and-arrow configuration. Very powerful gi choke.",
                "key_points": [
                    "Deep collar grip behind the neck",
                    "Hook near leg with same side leg",
                    "Grab their pants at the knee",
                    "Extend legs and pull collar",
                ],
                "starting_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "cross-choke": {
                "name": "Cross Choke",
                "aliases": ["X-Choke", "Cross Collar Choke"],
                "subcategory": "choke",
                "difficulty": "fundamental",
                "description": "Fundamental gi choke using crossed grips on opponent's collar. Can be applied from mount, guard, or side control.",
                "key_points": [
                    "Get deep collar grips, thumbs inside",
                    "Cross wrists",
                    "Pull elbows to your ribs",
                    "Twist wrists outward",
                ],
                "starting_position": "mount",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "loop-choke": {
                "name": "Loop Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Deceptive choke involving feeding one collar grip deep to create a loop around opponent's neck.",
                "key_points": [
                    "Feed collar grip deep",
                    "Create loop around neck",
                    "Pull head into the loop",
                    "Roll to finish if needed",
                ],
                "starting_position": "open-guard",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "baseball-choke": {
                "name": "Baseball Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Uses a baseball bat-style grip on the collar. Often from knee on belly or during guard passing.",
                "key_points": [
                    "Grip collar like a baseball bat",
                    "One palm up, one palm down",
                    "Spin to north-south",
                    "Extend arms to finish",
                ],
                "starting_position": "knee-on-belly",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "clock-choke": {
                "name": "Clock Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Applied from turtle position, walking around opponent like the hands of a clock while maintaining collar grip.",
                "key_points": [
                    "Deep collar grip",
                    "Block their hip with knee",
                    "Walk around their head",
                    "Drop hip to finish",
                ],
                "starting_position": "turtle",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "paper-cutter": {
                "name": "Paper Cutter Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Applied from side control or north-south using lapel to create a sliding choke across the neck.",
                "key_points": [
                    "Grip far collar",
                    "Feed lapel under their head",
                    "Drive elbow to mat",
                    "Slide forearm across throat",
                ],
                "starting_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "gogoplata": {
                "name": "Gogoplata",
                "subcategory": "choke",
                "difficulty": "advanced",
                "description": "Applied from rubber guard or mount, using the shin bone across the throat.",
                "key_points": [
                    "Control head with overhook",
                    "Place shin across throat",
                    "Pull head down onto shin",
                    "Extend hips",
                ],
                "starting_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "von-flue-choke": {
                "name": "Von Flue Choke",
                "subcategory": "choke",
                "difficulty": "intermediate",
                "description": "Counter to guillotine when you pass to side control. Use shoulder pressure to choke.",
                "key_points": [
                    "Pass to side control with head trapped",
                    "Drive shoulder into neck",
                    "Grab your own thigh",
                    "Drop hips and pressure",
                ],
                "starting_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "buggy-choke": {
                "name": "Buggy Choke",
                "subcategory": "choke",
                "difficulty": "advanced",
                "description": "Modern choke from bottom side control using a triangle configuration with inverted hips.",
                "key_points": [
                    "From bottom side control",
                    "Thread leg over their neck",
                    "Lock triangle with other leg",
                    "Squeeze and extend",
                ],
                "starting_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "armbar": {
                "name": "Armbar",
                "aliases": ["Juji Gatame"],
                "subcategory": "joint-lock",
                "difficulty": "fundamental",
                "description": "The most common submission in BJJ. Hyperextends the elbow by controlling the arm while using hips as a fulcrum. Can be applied from virtually any position.",
                "key_points": [
                    "Control the arm with both hands",
                    "Pinch knees together",
                    "Keep their thumb pointing up",
                    "Raise hips while pulling arm down",
                ],
                "starting_position": "multiple",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["triangle-choke", "omoplata"],
            },
            "kimura": {
                "name": "Kimura",
                "aliases": ["Gyaku Ude Garami", "Double Wristlock"],
                "subcategory": "joint-lock",
                "difficulty": "fundamental",
                "description": "Shoulder lock using figure-four grip on opponent's arm, rotating internally to attack shoulder. Named after judoka Masahiko Kimura.",
                "key_points": [
                    "Figure-four grip on their wrist",
                    "Keep their elbow tight to your body",
                    "Rotate their arm behind their back",
                    "Keep your elbows pinched",
                ],
                "starting_position": "multiple",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["americana", "hip-bump-sweep"],
            },
            "americana": {
                "name": "Americana",
                "aliases": ["Ude Garami", "Keylock", "Paintbrush"],
                "subcategory": "joint-lock",
                "difficulty": "fundamental",
                "description": "Shoulder lock similar to Kimura but with external rotation. Most commonly applied from mount or side control.",
                "key_points": [
                    "Pin their wrist to the mat",
                    "Figure-four grip",
                    "Keep elbow stationary",
                    "Slide wrist toward their hip",
                ],
                "starting_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["kimura", "arm-triangle"],
            },
            "omoplata": {
                "name": "Omoplata",
                "aliases": ["Ashi Sankaku Garami"],
                "subcategory": "joint-lock",
                "difficulty": "intermediate",
                "description": "Shoulder lock using legs to isolate and attack the shoulder. Often leads to sweeps or back takes if opponent defends.",
                "key_points": [
                    "Control their arm with your legs",
                    "Sit up and control their hip",
                    "Keep them flat",
                    "Lean forward for the finish",
                ],
                "starting_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["triangle-choke", "armbar"],
            },
            "wrist-lock": {
                "name": "Wrist Lock",
                "subcategory": "joint-lock",
                "difficulty": "intermediate",
                "description": "Hyperextension or rotation of the wrist joint. Often opportunistic submissions from grip fighting.",
                "key_points": [
                    "Control their forearm",
                    "Bend wrist past natural range",
                    "Keep pressure steady",
                    "Quick finish when available",
                ],
                "starting_position": "multiple",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Blue belt and above in IBJJF",
            },
            "bicep-slicer": {
                "name": "Bicep Slicer",
                "subcategory": "joint-lock",
                "difficulty": "advanced",
                "description": "Compression lock that crushes the bicep against the forearm bone. Advanced technique due to injury potential.",
                "key_points": [
                    "Control arm in armbar position",
                    "Thread leg under their elbow",
                    "Close triangle on their arm",
                    "Extend hips",
                ],
                "starting_position": "multiple",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF",
            },
            "tarikoplata": {
                "name": "Tarikoplata",
                "subcategory": "joint-lock",
                "difficulty": "advanced",
                "description": "Modern shoulder lock that combines elements of omoplata and kimura. Named after Tarik Hopstock.",
                "key_points": [
                    "From omoplata position",
                    "Grab your own leg",
                    "Create kimura-like pressure",
                    "Roll to finish",
                ],
                "starting_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "baratoplata": {
                "name": "Baratoplata",
                "subcategory": "joint-lock",
                "difficulty": "advanced",
                "description": "Shoulder lock variation that combines armbar position with kimura-style rotation.",
                "key_points": [
                    "From armbar position",
                    "Figure-four their arm",
                    "Roll toward their legs",
                    "Apply shoulder pressure",
                ],
                "starting_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "straight-ankle-lock": {
                "name": "Straight Ankle Lock",
                "aliases": ["Achilles Lock", "Ankle Lock"],
                "subcategory": "leg-lock",
                "difficulty": "fundamental",
                "description": "Hyperextends the ankle by applying pressure to the Achilles tendon. One of the most fundamental leg attacks, legal at all belt levels.",
                "key_points": [
                    "Control leg with ashi garami",
                    "Blade of wrist on Achilles",
                    "Grip hands together",
                    "Arch back and extend hips",
                ],
                "starting_position": "open-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "related_techniques": ["heel-hook", "toe-hold"],
            },
            "heel-hook": {
                "name": "Heel Hook",
                "aliases": ["Inside Heel Hook", "Outside Heel Hook"],
                "subcategory": "leg-lock",
                "difficulty": "advanced",
                "description": "Extremely dangerous leg lock attacking the knee by controlling the heel and rotating. Banned in gi competitions due to injury risk but central to no-gi.",
                "key_points": [
                    "Control leg with proper ashi garami",
                    "Cup their heel",
                    "Keep their knee controlled",
                    "Rotate heel toward their butt",
                ],
                "starting_position": "open-guard",
                "gi_legal": False,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF No-Gi",
            },
            "toe-hold": {
                "name": "Toe Hold",
                "subcategory": "leg-lock",
                "difficulty": "intermediate",
                "description": "Attacks the ankle through rotation rather than extension. Often set up from same positions as heel hooks.",
                "key_points": [
                    "Figure-four grip on foot",
                    "Control their knee line",
                    "Rotate foot outward",
                    "Steady pressure",
                ],
                "starting_position": "open-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF Gi",
            },
            "kneebar": {
                "name": "Kneebar",
                "subcategory": "leg-lock",
                "difficulty": "intermediate",
                "description": "Hyperextends the knee joint similar to how armbar attacks elbow. Applied from various leg entanglement positions.",
                "key_points": [
                    "Control leg like an armbar",
                    "Pinch knees together",
                    "Hips on their thigh",
                    "Extend hips while pulling foot",
                ],
                "starting_position": "open-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF Gi",
            },
            "calf-slicer": {
                "name": "Calf Slicer",
                "subcategory": "leg-lock",
                "difficulty": "advanced",
                "description": "Compression lock crushing calf against back of knee. Typically applied from truck position or back control variations.",
                "key_points": [
                    "Control leg in truck or similar",
                    "Shin behind their knee",
                    "Fold their leg",
                    "Pull foot toward you",
                ],
                "starting_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF",
            },
            "estima-lock": {
                "name": "Estima Lock",
                "subcategory": "leg-lock",
                "difficulty": "advanced",
                "description": "Named after Victor Estima. Attacks foot by grabbing toes and applying pressure. Can be applied from various guard positions.",
                "key_points": [
                    "Control their foot",
                    "Grab toes and bend",
                    "Turn toward locked leg",
                    "Apply rotational pressure",
                ],
                "starting_position": "open-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "twister": {
                "name": "Twister",
                "subcategory": "spine-lock",
                "difficulty": "advanced",
                "description": "Spinal lock from truck position creating corkscrew motion on spine. Popularized by Eddie Bravo and 10th Planet.",
                "key_points": [
                    "Secure truck position",
                    "Control head with arm",
                    "Lock legs properly",
                    "Rotate spine",
                ],
                "starting_position": "back-control",
                "gi_legal": False,
                "no_gi_legal": True,
                "points": 0,
                "belt_restrictions": "Brown belt and above in IBJJF",
            },
            "electric-chair": {
                "name": "Electric Chair",
                "subcategory": "spine-lock",
                "difficulty": "advanced",
                "description": "Attacks the groin/hip from lockdown half guard. Can also be used as a sweep.",
                "key_points": [
                    "Secure lockdown",
                    "Underhook their leg",
                    "Elevate and stretch",
                    "Control their upper body",
                ],
                "starting_position": "half-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
        },
    },
    "position": {
        "items": {
            "mount-position": {
                "name": "Mount",
                "aliases": ["Full Mount", "Mounted Position"],
                "subcategory": "dominant-position",
                "difficulty": "fundamental",
                "description": "One of the most dominant positions. Sitting on opponent's chest/torso with weight distributed. Offers numerous submission opportunities.",
                "key_points": [
                    "Keep weight on their chest",
                    "Maintain strong base",
                    "Knees squeeze their ribs",
                    "Stay low to prevent bridging",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "back-control-position": {
                "name": "Back Control",
                "aliases": ["Back Mount", "Rear Mount"],
                "subcategory": "dominant-position",
                "difficulty": "fundamental",
                "description": "The most dominant position in BJJ. Behind opponent with both legs hooked (hooks) inside their thighs. Maximum 4 points.",
                "key_points": [
                    "Hooks inside their thighs",
                    "Control their upper body",
                    "Prevent them turning",
                    "Set up the choke",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "side-control-position": {
                "name": "Side Control",
                "aliases": ["Cross-Side", "Side Mount", "Yoko Shiho Gatame"],
                "subcategory": "dominant-position",
                "difficulty": "fundamental",
                "description": "Fundamental control position perpendicular to opponent using weight and pressure. Gateway to mount and submissions.",
                "key_points": [
                    "Chest to chest pressure",
                    "Crossface control",
                    "Hip pressure",
                    "Block hip escape",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "knee-on-belly-position": {
                "name": "Knee on Belly",
                "aliases": ["KOB", "Knee Ride"],
                "subcategory": "dominant-position",
                "difficulty": "fundamental",
                "description": "Mobile control with knee on opponent's stomach/chest. Scores 2 points and creates significant pressure.",
                "key_points": [
                    "Knee on solar plexus",
                    "Wide base with other leg",
                    "Grip collar and pants",
                    "Apply downward pressure",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "north-south-position": {
                "name": "North-South",
                "aliases": ["69 Position"],
                "subcategory": "dominant-position",
                "difficulty": "intermediate",
                "description": "Head-to-head position perpendicular to opponent. Transitional control with specific submission opportunities.",
                "key_points": [
                    "Chest on their chest",
                    "Arms control their arms",
                    "Hips heavy",
                    "Prevent guard recovery",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "turtle-position": {
                "name": "Turtle",
                "subcategory": "defensive-position",
                "difficulty": "fundamental",
                "description": "Defensive shell on hands and knees protecting torso. Prevents back exposure but vulnerable to chokes and back takes.",
                "key_points": [
                    "Elbows tight to knees",
                    "Chin tucked",
                    "Protect neck",
                    "Ready to re-guard or stand",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
        },
    },
    "guard": {
        "items": {
            "closed-guard": {
                "name": "Closed Guard",
                "subcategory": "closed-guard",
                "difficulty": "fundamental",
                "description": "The most fundamental guard. Legs wrapped around opponent's torso with ankles locked. Controls opponent's posture and movement.",
                "key_points": [
                    "Ankles locked behind their back",
                    "Break their posture",
                    "Control their arms",
                    "Attack when they reach",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "butterfly-guard": {
                "name": "Butterfly Guard",
                "subcategory": "open-guard",
                "difficulty": "fundamental",
                "description": "Seated or supine with both feet hooked inside opponent's thighs. Excellent for sweeps and transitions.",
                "key_points": [
                    "Hooks inside their thighs",
                    "Maintain upright posture",
                    "Underhook or overhook",
                    "Load weight for sweeps",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "spider-guard": {
                "name": "Spider Guard",
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "Gi guard using sleeve grips with feet on opponent's biceps. Creates strong frame controlling distance.",
                "key_points": [
                    "Grip both sleeves",
                    "Feet on biceps",
                    "Push and pull",
                    "Control their posture",
                ],
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "lasso-guard": {
                "name": "Lasso Guard",
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "One leg threaded through opponent's arm, coiled with foot behind shoulder. Exceptional control of one side.",
                "key_points": [
                    "Thread leg through arm",
                    "Foot behind their shoulder",
                    "Sleeve grip",
                    "Control their posture",
                ],
                "gi_legal": True,
                "no_gi_legal": False,
                "points": 0,
            },
            "de-la-riva": {
                "name": "De La Riva Guard",
                "aliases": ["DLR"],
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "Named after Ricardo De La Riva. Hook behind opponent's knee while other leg controls hip. Foundation for berimbolo.",
                "key_points": [
                    "Hook behind their knee",
                    "Grip ankle and collar/sleeve",
                    "Other foot on hip",
                    "Off-balance forward",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "reverse-de-la-riva": {
                "name": "Reverse De La Riva",
                "aliases": ["RDLR"],
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "Hook from outside of opponent's leg. Often used against knee slice passing.",
                "key_points": [
                    "Hook from outside",
                    "Control their ankle",
                    "Block their knee",
                    "Prevent smash pass",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "x-guard": {
                "name": "X-Guard",
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "Creates X configuration with legs controlling both opponent's legs. Strong sweeping position.",
                "key_points": [
                    "Both legs control their legs",
                    "Foot on far hip",
                    "Hook near leg",
                    "Off-balance and sweep",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "single-leg-x": {
                "name": "Single Leg X Guard",
                "aliases": ["SLX", "Ashi Garami"],
                "subcategory": "open-guard",
                "difficulty": "intermediate",
                "description": "Both legs control one of opponent's legs. Excellent for leg locks and sweeps.",
                "key_points": [
                    "Both legs on one leg",
                    "Foot on hip",
                    "Control their ankle",
                    "Attack legs or sweep",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "half-guard": {
                "name": "Half Guard",
                "subcategory": "half-guard",
                "difficulty": "fundamental",
                "description": "One of opponent's legs trapped between your legs. Between guard and being passed. Many offensive options.",
                "key_points": [
                    "Control their leg",
                    "Get the underhook",
                    "Prevent crossface",
                    "Create angle",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "deep-half": {
                "name": "Deep Half Guard",
                "subcategory": "half-guard",
                "difficulty": "intermediate",
                "description": "Body positioned under opponent's trapped leg. Excellent for sweeps and back takes.",
                "key_points": [
                    "Get deep under them",
                    "Control their leg",
                    "Block their base",
                    "Sweep or take back",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "knee-shield": {
                "name": "Knee Shield Half Guard",
                "aliases": ["Z-Guard"],
                "subcategory": "half-guard",
                "difficulty": "fundamental",
                "description": "Using knee as barrier to create distance in half guard. Effective defensive framework.",
                "key_points": [
                    "Knee across their body",
                    "Frame with arms",
                    "Control their sleeve",
                    "Prevent smash",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "lockdown": {
                "name": "Lockdown",
                "subcategory": "half-guard",
                "difficulty": "intermediate",
                "description": "Locking opponent's leg with figure-four configuration from half guard. 10th Planet staple.",
                "key_points": [
                    "Figure-four their leg",
                    "Stretch them out (whip up)",
                    "Get the underhook",
                    "Set up electric chair or sweep",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "rubber-guard": {
                "name": "Rubber Guard",
                "subcategory": "closed-guard",
                "difficulty": "advanced",
                "description": "Popularized by Eddie Bravo. Uses extreme flexibility to trap opponent's upper body with one leg from closed guard.",
                "key_points": [
                    "Pull leg high to shoulder",
                    "Control their posture",
                    "Set up submissions",
                    "Requires flexibility",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "50-50": {
                "name": "50/50 Guard",
                "subcategory": "open-guard",
                "difficulty": "advanced",
                "description": "Symmetrical leg entanglement. Both practitioners in similar position. Central to modern leg lock game.",
                "key_points": [
                    "Legs intertwined equally",
                    "Control their heel",
                    "Attack or disengage",
                    "Avoid stalling",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
        },
    },
    "guard-pass": {
        "items": {
            "toreando": {
                "name": "Toreando Pass",
                "aliases": ["Bullfighter Pass", "Toreador"],
                "difficulty": "fundamental",
                "description": "Standing pass controlling both legs and moving around them like a bullfighter. Emphasizes speed and timing.",
                "key_points": [
                    "Control both ankles/pants",
                    "Push legs to one side",
                    "Circle around",
                    "Drop weight to side control",
                ],
                "starting_position": "guard-top",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "knee-slice": {
                "name": "Knee Slice Pass",
                "aliases": ["Knee Cut", "Knee Slide"],
                "difficulty": "fundamental",
                "description": "One of the most fundamental passes. Driving knee across opponent's thigh while controlling upper body, slicing through guard.",
                "key_points": [
                    "Control their collar and hip",
                    "Slice knee across thigh",
                    "Keep weight forward",
                    "Crossface and settle",
                ],
                "starting_position": "guard-top",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "double-under": {
                "name": "Double Under Pass",
                "aliases": ["Stack Pass"],
                "difficulty": "fundamental",
                "description": "Pressure pass securing both arms under opponent's legs, stacking their weight. Neutralizes leg-based defenses.",
                "key_points": [
                    "Both arms under their legs",
                    "Hands on mat or their hips",
                    "Stack their weight up",
                    "Walk around to side",
                ],
                "starting_position": "closed-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "leg-drag": {
                "name": "Leg Drag Pass",
                "difficulty": "intermediate",
                "description": "Dynamic pass controlling one leg and dragging it across their body, creating angle to side control or back.",
                "key_points": [
                    "Control one ankle",
                    "Drag across their body",
                    "Pin leg with hip",
                    "Control their hip",
                ],
                "starting_position": "open-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "over-under": {
                "name": "Over-Under Pass",
                "difficulty": "intermediate",
                "description": "Pressure pass with one arm over one leg and under the other. Strong control allowing forward drive.",
                "key_points": [
                    "One arm over, one under",
                    "Connect hands",
                    "Walk hips to underhook side",
                    "Flatten them out",
                ],
                "starting_position": "half-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "long-step": {
                "name": "Long Step Pass",
                "difficulty": "intermediate",
                "description": "Distance-based pass taking large step around guard while maintaining distance to avoid sweeps.",
                "key_points": [
                    "Disengage from legs",
                    "Take big step around",
                    "Maintain collar control",
                    "Drop to side control",
                ],
                "starting_position": "open-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "x-pass": {
                "name": "X-Pass",
                "difficulty": "intermediate",
                "description": "Standing pass stepping over one leg while controlling other, creating X configuration leading to side control.",
                "key_points": [
                    "Push one leg down",
                    "Step over with near leg",
                    "Control other leg",
                    "Slide to side control",
                ],
                "starting_position": "open-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "smash-pass": {
                "name": "Smash Pass",
                "difficulty": "intermediate",
                "description": "Pressure passing using weight to flatten opponent's guard structure.",
                "key_points": [
                    "Heavy hip pressure",
                    "Control their knee line",
                    "Flatten their hips",
                    "Grind through",
                ],
                "starting_position": "half-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
            "body-lock-pass": {
                "name": "Body Lock Pass",
                "difficulty": "intermediate",
                "description": "Using body lock grip to control opponent while passing guard.",
                "key_points": [
                    "Lock hands around waist",
                    "Heavy chest pressure",
                    "Walk legs around",
                    "Keep connection",
                ],
                "starting_position": "open-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 3,
            },
        },
    },
    "sweep": {
        "items": {
            "scissor-sweep": {
                "name": "Scissor Sweep",
                "difficulty": "fundamental",
                "description": "Fundamental closed guard sweep using scissoring leg motion to off-balance and sweep.",
                "key_points": [
                    "Control sleeve and collar",
                    "Open guard, shin across hip",
                    "Chop their leg",
                    "Roll them over",
                ],
                "starting_position": "closed-guard",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "hip-bump-sweep": {
                "name": "Hip Bump Sweep",
                "aliases": ["Bump Sweep"],
                "difficulty": "fundamental",
                "description": "Closed guard sweep bumping hips up explosively to off-balance opponent.",
                "key_points": [
                    "Post on one hand",
                    "Bump hips explosively",
                    "Control their arm",
                    "Come up to mount",
                ],
                "starting_position": "closed-guard",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
                "related_techniques": ["kimura", "guillotine"],
            },
            "flower-sweep": {
                "name": "Flower Sweep",
                "aliases": ["Pendulum Sweep"],
                "difficulty": "fundamental",
                "description": "Closed guard sweep using pendulum motion with legs to lift and sweep.",
                "key_points": [
                    "Control sleeve and collar",
                    "Swing legs up high",
                    "Pendulum motion",
                    "Roll them over",
                ],
                "starting_position": "closed-guard",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "butterfly-sweep": {
                "name": "Butterfly Sweep",
                "aliases": ["Elevator Sweep"],
                "difficulty": "fundamental",
                "description": "Using butterfly hooks to lift and sweep opponent. One of the highest percentage sweeps.",
                "key_points": [
                    "Get underhook",
                    "Load them on your hook",
                    "Fall to side",
                    "Elevate and roll",
                ],
                "starting_position": "open-guard",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "tripod-sweep": {
                "name": "Tripod Sweep",
                "difficulty": "fundamental",
                "description": "Three-point base disruption sweep from open guard. Control sleeve, ankle, and push hip.",
                "key_points": [
                    "Grip sleeve and ankle",
                    "Foot on hip",
                    "Push and pull",
                    "Knock them down",
                ],
                "starting_position": "open-guard",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "sickle-sweep": {
                "name": "Sickle Sweep",
                "aliases": ["Hook Sweep"],
                "difficulty": "fundamental",
                "description": "Open guard sweep hooking behind opponent's leg while pushing their upper body.",
                "key_points": [
                    "Hook behind their knee",
                    "Push their shoulder",
                    "Timing with their step",
                    "Follow up on top",
                ],
                "starting_position": "open-guard",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "old-school-sweep": {
                "name": "Old School Sweep",
                "difficulty": "intermediate",
                "description": "Classic half guard sweep using underhook and leg control to come up.",
                "key_points": [
                    "Get the underhook",
                    "Block their far leg",
                    "Come up to knees",
                    "Drive through",
                ],
                "starting_position": "half-guard",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "dlr-sweep": {
                "name": "De La Riva Sweep",
                "difficulty": "intermediate",
                "description": "Classic sweep using DLR hook to off-balance opponent forward or backward.",
                "key_points": [
                    "Deep DLR hook",
                    "Control ankle and sleeve",
                    "Off-balance forward",
                    "Technical standup",
                ],
                "starting_position": "open-guard",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "berimbolo": {
                "name": "Berimbolo",
                "difficulty": "advanced",
                "description": "Inverted rotation from DLR leading to back take. Signature modern BJJ technique.",
                "key_points": [
                    "DLR hook",
                    "Invert under them",
                    "Rotate to their back",
                    "Secure back control",
                ],
                "starting_position": "open-guard",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "x-guard-sweep": {
                "name": "X-Guard Sweep",
                "difficulty": "intermediate",
                "description": "Forward or backward sweep from X-guard using leg control.",
                "key_points": [
                    "Control both legs",
                    "Off-balance direction",
                    "Technical standup",
                    "Follow up on top",
                ],
                "starting_position": "open-guard",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "waiter-sweep": {
                "name": "Waiter Sweep",
                "difficulty": "intermediate",
                "description": "Using arm control like carrying a tray to sweep from half guard.",
                "key_points": [
                    "Control their far arm",
                    "Elevate like a tray",
                    "Bridge and roll",
                    "Come up on top",
                ],
                "starting_position": "half-guard",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
        },
    },
    "takedown": {
        "items": {
            "double-leg": {
                "name": "Double Leg Takedown",
                "subcategory": "wrestling",
                "difficulty": "fundamental",
                "description": "Fundamental wrestling takedown grabbing both legs and driving opponent to mat.",
                "key_points": [
                    "Level change",
                    "Penetration step",
                    "Head on their hip",
                    "Drive through",
                ],
                "starting_position": "standing",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "single-leg": {
                "name": "Single Leg Takedown",
                "subcategory": "wrestling",
                "difficulty": "fundamental",
                "description": "Targeting one leg with multiple finishing options. Safer than double leg against guillotine.",
                "key_points": [
                    "Level change",
                    "Control one leg",
                    "Head on inside",
                    "Run the pipe or trip",
                ],
                "starting_position": "standing",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "ankle-pick": {
                "name": "Ankle Pick",
                "subcategory": "wrestling",
                "difficulty": "intermediate",
                "description": "Quick takedown grabbing opponent's ankle while off-balancing backward.",
                "key_points": [
                    "Snap their head",
                    "Reach for ankle",
                    "Push shoulder back",
                    "Pick the ankle",
                ],
                "starting_position": "standing",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "arm-drag-takedown": {
                "name": "Arm Drag to Takedown",
                "subcategory": "wrestling",
                "difficulty": "fundamental",
                "description": "Using arm drag to get behind opponent for takedown.",
                "key_points": [
                    "Two-on-one grip",
                    "Pull arm across",
                    "Circle behind",
                    "Take down from back",
                ],
                "starting_position": "standing",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "snap-down": {
                "name": "Snap Down",
                "subcategory": "wrestling",
                "difficulty": "fundamental",
                "description": "Using head and arm control to snap opponent down to turtle or front headlock.",
                "key_points": [
                    "Collar tie and wrist",
                    "Snap head down",
                    "Sprawl back",
                    "Circle to back",
                ],
                "starting_position": "standing",
                "ending_position": "turtle",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "osoto-gari": {
                "name": "Osoto Gari",
                "aliases": ["Major Outer Reap"],
                "subcategory": "judo",
                "difficulty": "fundamental",
                "description": "Fundamental judo throw reaping opponent's leg from outside while driving backward.",
                "key_points": [
                    "Collar and sleeve grip",
                    "Step beside them",
                    "Reap their leg",
                    "Drive them down",
                ],
                "starting_position": "standing",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "ouchi-gari": {
                "name": "Ouchi Gari",
                "aliases": ["Major Inner Reap"],
                "subcategory": "judo",
                "difficulty": "fundamental",
                "description": "Judo throw reaping opponent's leg from inside.",
                "key_points": [
                    "Grip collar and sleeve",
                    "Step between legs",
                    "Reap inner leg",
                    "Push them backward",
                ],
                "starting_position": "standing",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "seoi-nage": {
                "name": "Seoi Nage",
                "aliases": ["Shoulder Throw", "Ippon Seoi Nage"],
                "subcategory": "judo",
                "difficulty": "intermediate",
                "description": "Forward throw loading opponent onto back/shoulder and throwing forward.",
                "key_points": [
                    "Turn into them",
                    "Load on your back",
                    "Drop your hips",
                    "Throw over shoulder",
                ],
                "starting_position": "standing",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "hip-throw": {
                "name": "Hip Throw",
                "aliases": ["O Goshi", "Major Hip Throw"],
                "subcategory": "judo",
                "difficulty": "fundamental",
                "description": "Using hips to throw opponent over your back.",
                "key_points": [
                    "Get hips below theirs",
                    "Pull them onto your hip",
                    "Rotate and bend",
                    "Throw over hip",
                ],
                "starting_position": "standing",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "tomoe-nage": {
                "name": "Tomoe Nage",
                "aliases": ["Circle Throw", "Sacrifice Throw"],
                "subcategory": "judo",
                "difficulty": "intermediate",
                "description": "Sacrifice throw falling backward while placing foot in stomach, throwing overhead.",
                "key_points": [
                    "Pull them forward",
                    "Fall back, foot on hip",
                    "Roll them over you",
                    "Follow to mount",
                ],
                "starting_position": "standing",
                "ending_position": "mount",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "uchi-mata": {
                "name": "Uchi Mata",
                "aliases": ["Inner Thigh Throw"],
                "subcategory": "judo",
                "difficulty": "advanced",
                "description": "Powerful throw using inner thigh to lift opponent while rotating.",
                "key_points": [
                    "Strong kuzushi",
                    "Sweep their inner thigh",
                    "Rotate your body",
                    "Throw them over",
                ],
                "starting_position": "standing",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
            "kouchi-gari": {
                "name": "Kouchi Gari",
                "aliases": ["Minor Inner Reap"],
                "subcategory": "judo",
                "difficulty": "fundamental",
                "description": "Quick minor inner reap often used as setup for other throws.",
                "key_points": [
                    "Off-balance backward",
                    "Reap their heel",
                    "Push through",
                    "Follow to ground",
                ],
                "starting_position": "standing",
                "ending_position": "guard-top",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 2,
            },
        },
    },
    "escape": {
        "items": {
            "upa": {
                "name": "Upa",
                "aliases": ["Bridge and Roll", "Trap and Roll"],
                "subcategory": "position-escape",
                "difficulty": "fundamental",
                "description": "Fundamental mount escape bridging explosively to roll opponent over.",
                "key_points": [
                    "Trap arm and leg same side",
                    "Bridge explosively",
                    "Turn toward trapped side",
                    "End in their guard",
                ],
                "starting_position": "mount",
                "ending_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "elbow-knee-escape": {
                "name": "Elbow-Knee Escape",
                "aliases": ["Shrimp Escape"],
                "subcategory": "position-escape",
                "difficulty": "fundamental",
                "description": "Creating space with hip escape to insert knee and recover guard.",
                "key_points": [
                    "Frame against their hip",
                    "Shrimp away",
                    "Insert knee",
                    "Recover guard",
                ],
                "starting_position": "mount",
                "ending_position": "half-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "side-control-escape": {
                "name": "Side Control Escape",
                "aliases": ["Hip Escape from Side"],
                "subcategory": "position-escape",
                "difficulty": "fundamental",
                "description": "Creating space through hip escape to recover guard from side control.",
                "key_points": [
                    "Frame against neck and hip",
                    "Shrimp to create space",
                    "Insert knee",
                    "Recover guard",
                ],
                "starting_position": "side-control",
                "ending_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "back-escape": {
                "name": "Back Escape",
                "aliases": ["Hook Removal"],
                "subcategory": "position-escape",
                "difficulty": "fundamental",
                "description": "Systematically removing hooks and escaping back control.",
                "key_points": [
                    "Fight the hands",
                    "Remove bottom hook",
                    "Turn toward choking arm",
                    "Get to side control",
                ],
                "starting_position": "back-control",
                "ending_position": "side-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "turtle-escape": {
                "name": "Turtle Escape",
                "aliases": ["Sit Out", "Granby Roll"],
                "subcategory": "position-escape",
                "difficulty": "fundamental",
                "description": "Escaping from turtle position to recover guard or stand.",
                "key_points": [
                    "Protect neck",
                    "Sit out or granby",
                    "Face opponent",
                    "Recover guard",
                ],
                "starting_position": "turtle",
                "ending_position": "closed-guard",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "armbar-escape": {
                "name": "Armbar Escape",
                "aliases": ["Hitchhiker Escape"],
                "subcategory": "submission-escape",
                "difficulty": "fundamental",
                "description": "Escaping armbar by rotating thumb up and pulling arm out.",
                "key_points": [
                    "Turn thumb up (hitchhiker)",
                    "Stack if possible",
                    "Circle arm out",
                    "Pass or recover",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "triangle-escape": {
                "name": "Triangle Escape",
                "aliases": ["Stack and Pass"],
                "subcategory": "submission-escape",
                "difficulty": "fundamental",
                "description": "Escaping triangle by stacking opponent and passing.",
                "key_points": [
                    "Posture up immediately",
                    "Stack their weight",
                    "Work arm out",
                    "Pass to side",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "guillotine-escape": {
                "name": "Guillotine Escape",
                "aliases": ["Von Flue Position"],
                "subcategory": "submission-escape",
                "difficulty": "fundamental",
                "description": "Escaping guillotine by passing to side control.",
                "key_points": [
                    "Turn chin to choking arm",
                    "Pass to side control",
                    "Pressure shoulder",
                    "Wait them out or Von Flue",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
            "heel-hook-escape": {
                "name": "Heel Hook Escape",
                "aliases": ["Sprinter Escape"],
                "subcategory": "submission-escape",
                "difficulty": "advanced",
                "description": "Escaping heel hook by clearing the knee line.",
                "key_points": [
                    "Don't let them control heel",
                    "Clear knee line",
                    "Turn toward them",
                    "Disengage legs",
                ],
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 0,
            },
        },
    },
    "back-take": {
        "items": {
            "arm-drag-back-take": {
                "name": "Arm Drag to Back",
                "difficulty": "fundamental",
                "description": "Using arm drag from guard to get to opponent's back.",
                "key_points": [
                    "Two-on-one grip",
                    "Pull arm across",
                    "Circle to their back",
                    "Secure hooks",
                ],
                "starting_position": "closed-guard",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "kimura-back-take": {
                "name": "Kimura to Back Take",
                "difficulty": "intermediate",
                "description": "Using kimura grip from half guard to transition to back.",
                "key_points": [
                    "Secure kimura grip",
                    "Roll under them",
                    "Come up to their back",
                    "Insert hooks",
                ],
                "starting_position": "half-guard",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "chair-sit-back-take": {
                "name": "Chair Sit Back Take",
                "difficulty": "intermediate",
                "description": "Taking back from turtle using chair sit motion.",
                "key_points": [
                    "Control from turtle",
                    "Sit through",
                    "Insert hooks",
                    "Secure seat belt",
                ],
                "starting_position": "turtle",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "spiral-ride-back-take": {
                "name": "Spiral Ride to Back",
                "difficulty": "intermediate",
                "description": "Wrestling-style back take from turtle.",
                "key_points": [
                    "Control near wrist",
                    "Spiral them down",
                    "Insert hooks",
                    "Secure control",
                ],
                "starting_position": "turtle",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
            "kiss-of-dragon": {
                "name": "Kiss of the Dragon",
                "difficulty": "advanced",
                "description": "Inverted technique from DLR leading to back control.",
                "key_points": [
                    "DLR hook",
                    "Invert under",
                    "Thread through",
                    "Emerge at their back",
                ],
                "starting_position": "open-guard",
                "ending_position": "back-control",
                "gi_legal": True,
                "no_gi_legal": True,
                "points": 4,
            },
        },
    },
}
