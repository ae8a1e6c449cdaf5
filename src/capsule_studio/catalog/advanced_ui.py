"""Advanced UI capsules: multi-step wizards and menus."""

from capsule_studio.specs.capsule import CapsuleDefinition, CapsuleProp

ADVANCED_UI_CAPSULES: list[CapsuleDefinition] = [
    CapsuleDefinition(
        id="multi-step-form",
        name="Multi-Step Form",
        description="Wizard-style multi-step form with validation",
        category="feature",
        props=[
            CapsuleProp(
                name="steps",
                type="array",
                required=True,
                default=[
                    {"title": "Personal Info", "fields": ["name", "email"]},
                    {"title": "Address", "fields": ["street", "city"]},
                    {"title": "Review", "fields": []},
                ],
                description="Form steps configuration",
            ),
        ],
        dependencies=[],
        code="""
function MultiStepForm({ steps = [
  { title: 'Personal Info', fields: ['name', 'email'] },
  { title: 'Address', fields: ['street', 'city'] },
  { title: 'Review', fields: [] }
] }) {
  const [currentStep, setCurrentStep] = React.useState(0)
  const [formData, setFormData] = React.useState({})

  const nextStep = () => {
    if (currentStep < steps.length - 1) {
      setCurrentStep(currentStep + 1)
    }
  }

  const prevStep = () => {
    if (currentStep > 0) {
      setCurrentStep(currentStep - 1)
    }
  }

  const handleChange = (field, value) => {
    setFormData({ ...formData, [field]: value })
  }

  const isLastStep = currentStep === steps.length - 1

  return (
    <div className="bg-white rounded-xl border border-gray-200 p-8 max-w-2xl mx-auto">
      {/* Progress Bar */}
      <div className="mb-8">
        <div className="flex justify-between mb-2">
          {steps.map((step, idx) => (
            <div
              key={idx}
              className={`flex-1 text-center text-sm font-medium ${
                idx <= currentStep ? 'text-blue-600' : 'text-gray-400'
              }`}
            >
              {step.title}
            </div>
          ))}
        </div>
        <div className="relative h-2 bg-gray-200 rounded-full overflow-hidden">
          <div
            className="absolute top-0 left-0 h-full bg-gradient-to-r from-blue-600 to-purple-600 transition-all duration-300"
            style={{ width: `${((currentStep + 1) / steps.length) * 100}%` }}
          ></div>
        </div>
      </div>

      {/* Step Content */}
      <div className="mb-8 min-h-[200px]">
        <h2 className="text-2xl font-bold text-gray-900 mb-6">
          {steps[currentStep].title}
        </h2>

        {currentStep === steps.length - 1 ? (
          <div className="bg-gray-50 rounded-lg p-6">
            <h3 className="font-semibold text-gray-900 mb-4">Review Your Information</h3>
            {Object.entries(formData).map(([key, value]) => (
              <div key={key} className="flex justify-between py-2 border-b border-gray-200">
                <span className="text-gray-600 capitalize">{key}:</span>
                <span className="font-medium text-gray-900">{value}</span>
              </div>
            ))}
          </div>
        ) : (
          <div className="space-y-4">
            {steps[currentStep].fields.map((field) => (
              <div key={field}>
                <label className="block text-sm font-medium text-gray-700 mb-2 capitalize">
                  {field}
                </label>
                <input
                  type="text"
                  value={formData[field] || ''}
                  onChange={(e) => handleChange(field, e.target.value)}
                  className="w-full px-4 py-2 border border-gray-300 rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500"
                  placeholder={`Enter ${field}`}
                />
              </div>
            ))}
          </div>
        )}
      </div>

      {/* Navigation Buttons */}
      <div className="flex justify-between">
        <button
          onClick={prevStep}
          disabled={currentStep === 0}
          className="px-6 py-2 bg-gray-200 text-gray-700 rounded-lg hover:bg-gray-300 disabled:opacity-50 disabled:cursor-not-allowed"
        >
          Previous
        </button>

        <button
          onClick={nextStep}
          className={`px-6 py-2 rounded-lg text-white font-semibold ${
            isLastStep
              ? 'bg-green-600 hover:bg-green-700'
              : 'bg-gradient-to-r from-blue-600 to-purple-600 hover:from-blue-700 hover:to-purple-700'
          }`}
        >
          {isLastStep ? 'Submit' : 'Next'}
        </button>
      </div>
    </div>
  )
}""",
    ),
    CapsuleDefinition(
        id="dropdown",
        name="Dropdown Menu",
        description="Dropdown menu with options",
        category="ui",
        props=[
            CapsuleProp(name="label", type="string", required=True, default="Menu", description="Button label"),
            CapsuleProp(name="options", type="array", required=True, default=["Option 1", "Option 2", "Option 3"], description="Menu options"),
        ],
        dependencies=[],
        code="""
function Dropdown({ label = 'Menu', options = ['Option 1', 'Option 2', 'Option 3'] }) {
  const [isOpen, setIsOpen] = React.useState(false)
  const [selected, setSelected] = React.useState(null)

  return (
    <div className="relative inline-block">
      <button
        onClick={() => setIsOpen(!isOpen)}
        className="px-4 py-2 bg-white border border-gray-300 rounded-lg hover:bg-gray-50 flex items-center gap-2"
      >
        {selected || label}
        <span className="text-gray-400">▼</span>
      </button>

      {isOpen && (
        <div className="absolute top-full left-0 mt-2 bg-white border border-gray-200 rounded-lg shadow-lg min-w-[200px] z-50">
          {options.map((option, index) => (
            <button
              key={index}
              onClick={() => {
                setSelected(option)
                setIsOpen(false)
              }}
              className="w-full px-4 py-2 text-left hover:bg-gray-100 first:rounded-t-lg last:rounded-b-lg"
            >
              {option}
            </button>
          ))}
        </div>
      )}
    </div>
  )
}""",
    ),
]
